from __future__ import annotations

import json
import math
import click

from fzyscore.CustomLogging import logging
from fzyscore.config import configuration_from_environment
from fzyscore.matching import (
    InvalidConfiguration,
    MatchConfiguration,
    filter_haystacks,
    positions as match_positions,
    rank,
    score as match_score,
)


def matching_options(func):
    """Options shared by every matching command."""
    func = click.option(
        "--max-length",
        type=int,
        default=None,
        help="Haystacks longer than this never match (default 1024).",
    )(func)
    func = click.option(
        "--case-sensitive/--ignore-case",
        default=None,
        help="Compare characters with or without ASCII case folding (default: ignore case).",
    )(func)
    return func


def build_configuration(case_sensitive: bool | None, max_length: int | None) -> MatchConfiguration:
    try:
        return configuration_from_environment(case_sensitive=case_sensitive, max_match_length=max_length)
    except InvalidConfiguration as e:
        raise click.BadParameter(str(e)) from e


def format_score(value: float) -> str:
    # JSON has no infinities; print the sentinels by name
    if math.isinf(value):
        return "max" if value > 0 else "min"
    return f"{value:.6g}"


def json_score(value: float) -> float | str:
    if math.isinf(value):
        return format_score(value)
    return value


@click.command("score", help="Score NEEDLE against HAYSTACK.")
@click.argument("needle")
@click.argument("haystack")
@matching_options
def score(needle: str, haystack: str, case_sensitive: bool | None = None, max_length: int | None = None):
    config = build_configuration(case_sensitive, max_length)
    result = match_score(config, needle, haystack)
    logging.debug(f"score({needle!r}, {haystack!r}) = {result}")
    click.echo(format_score(result))


@click.command("positions", help="Print the score and one-based match positions of NEEDLE in HAYSTACK as JSON.")
@click.argument("needle")
@click.argument("haystack")
@matching_options
def positions(needle: str, haystack: str, case_sensitive: bool | None = None, max_length: int | None = None):
    config = build_configuration(case_sensitive, max_length)
    matched, result = match_positions(config, needle, haystack)
    click.echo(json.dumps({"score": json_score(result), "positions": matched}))


@click.command("filter", help="Print the lines of INPUT (default stdin) that fuzzy-match NEEDLE.")
@click.argument("needle")
@click.argument("input", type=click.File("r"), default="-")
@matching_options
@click.option("--sort/--no-sort", default=False, help="Rank matches by descending score.")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Print at most this many matches.")
@click.option("--show-scores", is_flag=True, help="Prefix each line with its score.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"], case_sensitive=False), default="text", show_default=True)
def filter_command(
    needle: str,
    input,
    case_sensitive: bool | None = None,
    max_length: int | None = None,
    sort: bool = False,
    limit: int | None = None,
    show_scores: bool = False,
    output_format: str = "text",
):
    config = build_configuration(case_sensitive, max_length)
    candidates = [line.rstrip("\r\n") for line in input]

    results = rank(config, needle, candidates) if sort else filter_haystacks(config, needle, candidates)
    if limit is not None:
        results = results[:limit]
    logging.debug(f"{len(results)} of {len(candidates)} candidate(s) shown for {needle!r}")

    if output_format.lower() == "json":
        click.echo(json.dumps([
            {
                "index": result.index,
                "text": candidates[result.index - 1],
                "positions": result.positions,
                "score": json_score(result.score),
            }
            for result in results
        ], indent=2))
        return

    for result in results:
        line = candidates[result.index - 1]
        if show_scores:
            click.echo(f"{format_score(result.score)}\t{line}")
        else:
            click.echo(line)
