from puzsolve.cli import cli

cli()
