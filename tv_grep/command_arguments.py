# Custom decorators for common command arguments
import click


def ignore_case(f):
    return click.option(
        "--ignore-case",
        "-i",
        is_flag=True,
        default=False,
        help="match every REGEXP ignoring case",
    )(f)


def output_path(f):
    return click.option(
        "--output",
        "output_path",
        type=click.Path(dir_okay=False, writable=True),
        default=None,
        help="write to FILE rather than standard output",
    )(f)


def issue_path(f):
    return click.option(
        "--issue-path",
        type=click.Path(dir_okay=False, writable=True),
        default=None,
        help="save problems found in the listings as CSV",
    )(f)


def no_eval(f):
    return click.option(
        "--no-eval",
        is_flag=True,
        default=False,
        envvar="TV_GREP_NO_EVAL",
        help="disable --eval predicates supplied by plugins",
    )(f)
