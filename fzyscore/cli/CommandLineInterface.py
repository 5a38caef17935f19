"""
Main entry point for the fzyscore CLI.
"""

import click
import logging

from fzyscore.CustomLogging import load_environment, setup_logging
from fzyscore.cli.MatchCommands import score, positions, filter_command


# Keep commands in registration order in --help
class OrderCommands(click.Group):
    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)


@click.group(cls=OrderCommands)
@click.option('--debug', is_flag=True, help="Enable debug logging.")
def cli(debug):
    """
    fzyscore CLI for fuzzy scoring and filtering of candidate strings.
    """
    # Without the flag, the level chosen by setup_logging from DEBUG stands
    if debug:
        root_logger = logging.getLogger()
        for handler in root_logger.handlers:
            handler.setLevel(logging.DEBUG)
        root_logger.setLevel(logging.DEBUG)


cli.add_command(score)
cli.add_command(positions)
cli.add_command(filter_command)


def main():
    """
    fzyscore Command Line Interface.
    This function is the entry point when the `fzyscore` command is run.
    """
    load_environment()

    # Load YAML configuration before logging so that its debug setting applies
    try:
        from fzyscore.config import load_config
        load_config()
    except Exception as e:
        # Don't fail CLI startup if config loading fails, just log a warning
        logging.warning(f"Failed to load YAML configuration: {e}")

    setup_logging()
    cli()


if __name__ == '__main__':
    main()
