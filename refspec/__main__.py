from importlib.metadata import version

import click

from refspec.cli import cli

version = version("refspec")

# Override built in version detection to fix issues when running as __main__
click.version_option(version=version, package_name="refspec")(cli)

cli()
