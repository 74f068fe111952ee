import logging

import click

from tv_grep.commands import grep, list_tests
from tv_grep.command_arguments import ignore_case, issue_path, no_eval, output_path
from tv_grep.errors import ConfigurationError, TvGrepError


class ExpressionCommand(click.Command):
    """
    a command which passes "--" and everything after it to the expression
    argument, click would otherwise drop it
    """

    value_options = ["--output", "--issue-path"]

    def parse_args(self, ctx, args):
        end = len(args)
        i = 0
        while i < len(args):
            if args[i] == "--":
                end = i
                break
            if args[i] in self.value_options:
                i += 1
            i += 1

        rest = super().parse_args(ctx, args[:end])
        ctx.params["expression"] = tuple(ctx.params.get("expression") or ()) + tuple(
            args[end:]
        )
        return rest


@click.command(
    cls=ExpressionCommand,
    context_settings={"ignore_unknown_options": True},
    short_help="filter XMLTV listings",
)
@click.option("-d", "--debug/--no-debug", type=click.BOOL, default=False)
@ignore_case
@output_path
@issue_path
@no_eval
@click.option(
    "--list-tests", "list_tests_", is_flag=True, default=False, help="list the tests and exit"
)
@click.argument("expression", nargs=-1, type=click.UNPROCESSED)
def cli(debug, ignore_case, output_path, issue_path, no_eval, list_tests_, expression):
    """
    Keep the programmes of XMLTV listings which match an EXPRESSION, followed by
    the FILES to read, or standard input.

    The expression is either a single REGEXP matched against the whole of each
    programme, or tests such as --title REGEXP joined with --and, --or and
    --not. --and is implied between tests and binds more tightly than --or.
    Tests on the channel, --channel-id and --channel-name, also filter the
    channels. Use --list-tests to see them all.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if list_tests_:
        click.echo(list_tests())
        return

    try:
        grep(
            expression,
            output_path=output_path,
            issue_path=issue_path,
            ignore_case=ignore_case,
            allow_eval=not no_eval,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    except TvGrepError as e:
        raise click.ClickException(str(e))
