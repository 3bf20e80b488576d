"""Tests for the command-line interface."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.cli import load_base_flags, main


CLI_PATH = Path(__file__).resolve().parents[1] / "cli" / "cli.py"


def run(capsys, *argv):
    exit_code = main(list(argv))
    return exit_code, capsys.readouterr()


def test_prints_active_flags(capsys):
    exit_code, captured = run(capsys, 'MBEDTLS_PK_PARSE_C', 'MBEDTLS_ECP_C')
    assert exit_code == 0
    assert captured.out.splitlines() == [
        'MBEDTLS_ECP_C',
        'MBEDTLS_ECP_LIGHT',
        'MBEDTLS_PK_HAVE_ECC_KEYS',
        'MBEDTLS_PK_PARSE_C',
        'MBEDTLS_PK_PARSE_EC_COMPRESSED',
    ]


def test_all_prints_every_flag(capsys):
    exit_code, captured = run(capsys, '--all', 'MBEDTLS_MD_C')
    lines = captured.out.splitlines()
    assert exit_code == 0
    assert len(lines) == 32
    assert 'MBEDTLS_MD_LIGHT=1' in lines
    assert 'MBEDTLS_ECP_C=0' in lines


def test_explain(capsys):
    exit_code, captured = run(capsys, '--explain', 'MBEDTLS_PK_PARSE_C', 'MBEDTLS_ECP_C')
    assert exit_code == 0
    assert 'MBEDTLS_PK_PARSE_EC_COMPRESSED: MBEDTLS_PK_PARSE_C and MBEDTLS_ECP_C' in captured.out


def test_explain_with_nothing_derived(capsys):
    exit_code, captured = run(capsys, '--explain', 'MBEDTLS_PK_PARSE_C')
    assert exit_code == 0
    assert 'No flags were derived.' in captured.out


def test_flags_file(capsys, tmp_path):
    flags_file = tmp_path / 'config.json'
    flags_file.write_text(json.dumps({'MBEDTLS_ECDSA_C': True, 'MBEDTLS_USE_PSA_CRYPTO': False}))

    exit_code, captured = run(capsys, '--flags-file', str(flags_file))
    assert exit_code == 0
    assert 'MBEDTLS_PK_CAN_ECDSA_SOME' in captured.out.splitlines()


def test_command_line_flags_added_on_top_of_file(tmp_path):
    flags_file = tmp_path / 'config.json'
    flags_file.write_text(json.dumps({'MBEDTLS_ECP_C': False}))
    assert load_base_flags(['MBEDTLS_ECP_C'], str(flags_file)) == {'MBEDTLS_ECP_C': True}


def test_unknown_flag_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['MBEDTLS_NOT_A_MODULE_C'])
    assert exc_info.value.code == 2
    assert 'MBEDTLS_NOT_A_MODULE_C' in capsys.readouterr().err


def test_non_boolean_in_file_is_usage_error(tmp_path):
    flags_file = tmp_path / 'config.json'
    flags_file.write_text(json.dumps({'MBEDTLS_ECP_C': 1}))
    with pytest.raises(SystemExit) as exc_info:
        main(['--flags-file', str(flags_file)])
    assert exc_info.value.code == 2


def test_missing_flags_file_is_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(['--flags-file', str(tmp_path / 'missing.json')])
    assert exc_info.value.code == 2


def test_list_shows_categories(capsys):
    exit_code, captured = run(capsys, '--list')
    assert exit_code == 0
    assert 'Library Modules:' in captured.out
    assert 'MBEDTLS_PSA_CRYPTO_CLIENT' in captured.out


def run_cli_process(*argv):
    """Run the CLI in a fresh interpreter so logging starts unconfigured."""
    return subprocess.run(
        [sys.executable, str(CLI_PATH), *argv],
        capture_output=True,
        text=True,
        check=False)


def test_debug_loglevel_reports_each_pass():
    result = run_cli_process('--loglevel', 'debug', 'MBEDTLS_MD_C')
    assert result.returncode == 0
    assert result.stdout.splitlines() == ['MBEDTLS_MD_C', 'MBEDTLS_MD_LIGHT']
    assert 'Pass 1: MBEDTLS_MD_LIGHT <- MBEDTLS_MD_C' in result.stderr
    assert ' - DEBUG - ' in result.stderr
    assert 'Resolved 2 active flags' in result.stderr


def test_default_loglevel_is_quiet():
    result = run_cli_process('MBEDTLS_MD_C')
    assert result.returncode == 0
    assert result.stderr == ''


def test_unknown_loglevel_is_usage_error():
    result = run_cli_process('--loglevel', 'verbose', 'MBEDTLS_MD_C')
    assert result.returncode == 2
    assert 'Unknown logging level: verbose' in result.stderr
