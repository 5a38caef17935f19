import json
import os

import pytest
from click.testing import CliRunner

from fzyscore.cli.CommandLineInterface import cli
from fzyscore.config.loader import ConfigLoader


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_var in ConfigLoader.CONFIGURATION_FIELDS:
        monkeypatch.delenv(env_var, raising=False)


def test_score_command(runner):
    result = runner.invoke(cli, ['score', 'ab', 'a_b'])

    assert result.exit_code == 0
    assert result.output.strip() == '1.69'


def test_score_command_sentinels(runner):
    assert runner.invoke(cli, ['score', 'abc', 'ABC']).output.strip() == 'max'
    assert runner.invoke(cli, ['score', 'abc', 'ab']).output.strip() == 'min'


def test_score_command_case_sensitive(runner):
    result = runner.invoke(cli, ['score', '--case-sensitive', 'ABC', 'abc'])

    assert result.exit_code == 0
    assert result.output.strip() == 'min'


def test_score_command_max_length(runner):
    result = runner.invoke(cli, ['score', '--max-length', '2', 'a', 'abc'])

    assert result.exit_code == 0
    assert result.output.strip() == 'min'


def test_score_command_invalid_max_length(runner):
    result = runner.invoke(cli, ['score', '--max-length', '0', 'a', 'abc'])

    assert result.exit_code != 0
    assert 'Invalid' in result.output


def test_score_command_reads_environment(runner, monkeypatch):
    monkeypatch.setenv('FZYSCORE_CASE_SENSITIVE', 'true')
    result = runner.invoke(cli, ['score', 'ABC', 'abc'])

    assert result.output.strip() == 'min'


def test_positions_command(runner):
    result = runner.invoke(cli, ['positions', 'amo', 'app/models/order'])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload['positions'] == [1, 5, 6]
    assert payload['score'] == pytest.approx(2.72)


def test_positions_command_no_match(runner):
    result = runner.invoke(cli, ['positions', 'xyz', 'abc'])

    assert json.loads(result.output) == {'score': 'min', 'positions': []}


def test_filter_command_from_stdin(runner):
    result = runner.invoke(cli, ['filter', 'ab'], input='abc\nxbc\nabx\n')

    assert result.exit_code == 0
    assert result.output.splitlines() == ['abc', 'abx']


def test_filter_command_sorted_with_scores(runner):
    result = runner.invoke(
        cli,
        ['filter', 'ab', '--sort', '--show-scores'],
        input='xaybcd\na_b\nab\n',
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == ['max\tab', '1.69\ta_b', '-0.025\txaybcd']


def test_filter_command_limit(runner):
    result = runner.invoke(cli, ['filter', 'ab', '--sort', '--limit', '1'], input='xaybcd\na_b\n')

    assert result.output.splitlines() == ['a_b']


def test_filter_command_json(runner):
    result = runner.invoke(cli, ['filter', 'ab', '--format', 'json'], input='abc\nxbc\nabx\n')

    payload = json.loads(result.output)
    assert [entry['index'] for entry in payload] == [1, 3]
    assert payload[0]['text'] == 'abc'
    assert payload[0]['positions'] == [1, 2]
    assert payload[1]['score'] == pytest.approx(1.895)


def test_filter_command_from_file(runner, tmp_path):
    candidates = tmp_path / 'candidates.txt'
    candidates.write_text('src/main.py\nREADME.md\nsrc/matching/core.py\n', encoding='utf-8')

    result = runner.invoke(cli, ['filter', 'smc', str(candidates)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ['src/matching/core.py']


def test_help_lists_commands_in_order(runner):
    result = runner.invoke(cli, ['--help'])

    assert result.exit_code == 0
    listed = [line.split()[0] for line in result.output.split('Commands:')[1].strip().splitlines()]
    assert listed == ['score', 'positions', 'filter']
