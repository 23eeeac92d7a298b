from .main import cli_entry_point

cli_entry_point()
