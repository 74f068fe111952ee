"""
compile a find(1) style expression into a filter plan

Tests next to each other are joined with --and, which binds more tightly
than --or, and --not applies only to the test which follows it, so

    --title News --not --new --or --category Sport

keeps programmes which are (titled News and not new) or about Sport. The
plan is a list of conjunctions for programmes, and a parallel list holding
just the channel tests of each conjunction for channels.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from . import predicate
from .catalog import ArgumentKind, catalog, resolve
from .config import FilterConfig
from .errors import ConfigurationError

operators = ["and", "or", "not"]


def is_option(token):
    return token.startswith("--") and len(token) > 2


@dataclass
class FilterPlan:
    programme: List[List[Callable]] = field(default_factory=list)
    channel: List[List[Callable]] = field(default_factory=list)
    channel_name_patterns: List[str] = field(default_factory=list)
    ignore_case: bool = False

    def filters_channels(self):
        return any(self.channel)

    def keep_programme(self, programme, state):
        for conjunction in self.programme:
            if all(test(programme, state) for test in conjunction):
                return True
        return False

    def keep_channel(self, channel, state):
        if not self.filters_channels():
            return True
        # an empty conjunction is true, its programmes could be on any channel
        for conjunction in self.channel:
            if all(test(channel, state) for test in conjunction):
                return True
        return False


@dataclass
class Expression:
    plan: FilterPlan
    files: List[str] = field(default_factory=list)
    pattern: Optional[str] = None


class ExpressionCompiler:
    def __init__(self, config=None, tests=None):
        self.config = config or FilterConfig()
        self.tests = catalog if tests is None else tests

    def compile(self, tokens):
        tokens = list(tokens)
        names = list(self.tests) + operators

        plan = FilterPlan(ignore_case=self.config.ignore_case)
        programme, channel = [], []
        negated = False
        after_not = False
        after_or = False
        operator_used = False
        options_ended = False

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == "--":
                i += 1
                options_ended = True
                break
            if not is_option(token):
                break
            i += 1

            option, equals, value = token[2:].partition("=")
            if not equals:
                value = None
            name = resolve(option, names)

            if name in operators:
                operator_used = True
                if value is not None:
                    raise ConfigurationError(f"--{name} takes no argument")
                if name == "not":
                    negated = not negated
                    after_not = True
                    continue
                if after_not:
                    raise ConfigurationError("--not must be followed by a test")
                if name == "or":
                    if not programme:
                        raise ConfigurationError("nothing to the left of --or")
                    plan.programme.append(programme)
                    plan.channel.append(channel)
                    programme, channel = [], []
                    after_or = True
                continue

            test = self.tests[name]
            if test.kind is ArgumentKind.NONE:
                if value is not None:
                    raise ConfigurationError(f"--{name} takes no argument")
                argument = None
            elif value is not None:
                argument = value
            elif i < len(tokens):
                argument = tokens[i]
                i += 1
            else:
                raise ConfigurationError(
                    f"--{name} needs an argument: {test.kind.value}"
                )

            emission = test.build(argument, self.config)
            logging.debug(f"{'--not ' if negated else ''}--{name} {argument or ''}")

            targets = [(programme, emission.programme)]
            if emission.channel is not None:
                targets.append((channel, emission.channel))
            for conjunction, built in targets:
                conjunction.append(predicate.negate(built) if negated else built)

            if (
                emission.channel_name_pattern is not None
                and emission.channel_name_pattern not in plan.channel_name_patterns
            ):
                plan.channel_name_patterns.append(emission.channel_name_pattern)

            negated = False
            after_not = False
            after_or = False

        rest = tokens[i:]

        if after_not:
            raise ConfigurationError("--not must be followed by a test")
        if after_or:
            raise ConfigurationError("nothing to the right of --or")

        if programme:
            plan.programme.append(programme)
            plan.channel.append(channel)

        if plan.programme:
            for token in [] if options_ended else rest:
                if is_option(token):
                    raise ConfigurationError(
                        f"{token} found after the files to read, "
                        "tests must come before any files"
                    )
            return Expression(plan, files=rest)

        return self.compile_pattern(rest, operator_used, options_ended)

    def compile_pattern(self, rest, operator_used, options_ended=False):
        """
        the simple form: a single pattern matched against the whole programme
        """
        if not rest:
            raise ConfigurationError("nothing to filter on, give a pattern or some tests")

        pattern, files = rest[0], rest[1:]
        if operator_used or (
            not options_ended and any(is_option(token) for token in files)
        ):
            raise ConfigurationError(
                "a bare pattern can't be used together with tests or operators"
            )

        regexp = predicate.compile_pattern(pattern, self.config.ignore_case)
        plan = FilterPlan(
            programme=[[predicate.whole_record(regexp)]],
            channel=[[]],
            ignore_case=self.config.ignore_case,
        )
        return Expression(plan, files=files, pattern=pattern)


def compile_expression(tokens, config=None):
    return ExpressionCompiler(config).compile(tokens)
