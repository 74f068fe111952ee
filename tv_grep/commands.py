import logging

from .catalog import ArgumentKind, catalog
from .config import FilterConfig
from .engine import filter_listings_data
from .errors import OutputError
from .expression import compile_expression, operators
from .log import IssueLog
from .xmltv import read_files, write


def grep(
    tokens,
    output_path=None,
    issue_path=None,
    ignore_case=False,
    allow_eval=True,
    plugin_manager=None,
    f=None,
):
    config = FilterConfig(
        ignore_case=ignore_case,
        allow_eval=allow_eval,
        plugin_manager=plugin_manager,
    )

    # any problem with the expression is found before reading the listings
    expression = compile_expression(tokens, config)
    logging.debug(f"reading {expression.files or 'standard input'}")

    data = read_files(expression.files)
    issues = IssueLog()
    data = filter_listings_data(expression.plan, data, issues=issues)

    write(data, path=output_path, f=f)

    if issue_path:
        try:
            issues.save(path=issue_path)
        except OSError as e:
            raise OutputError(f"can't write {issue_path}: {e.strerror}")

    return issues


def list_tests():
    lines = []
    for name in sorted(catalog):
        test = catalog[name]
        argument = "" if test.kind is ArgumentKind.NONE else f" {test.kind.value}"
        lines.append(f"--{name}{argument}".ljust(28) + test.help)
    lines.append("")
    lines.extend(f"--{name}" for name in operators)
    return "\n".join(lines)
