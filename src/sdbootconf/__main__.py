from sdbootconf.cli import cli

cli()
