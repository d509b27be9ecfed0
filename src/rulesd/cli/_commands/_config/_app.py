"""Config command app."""

from cyclopts import App

app = App(name="config", help="Check and display the rules service configuration.")
