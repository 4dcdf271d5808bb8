import os
import subprocess
import sys
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SCRIPT = os.path.join(REPO_ROOT, "json_pretty.py")

TEST_DIR = os.path.dirname(__file__)

VALID_FILES = [
    "valid.json",
    "valid2.json"
]

INVALID_FILES = [
    "invalid.json",
    "invalid2.json"
]

@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_cases(filename):
    path = os.path.join(TEST_DIR, filename)
    result = subprocess.run([sys.executable, SCRIPT, path])
    assert result.returncode == 0

@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_cases(filename):
    path = os.path.join(TEST_DIR, filename)
    result = subprocess.run([sys.executable, SCRIPT, path])
    assert result.returncode == 1

def test_escaped_quotes_and_spaced_keys_render():
    """Spaced keys come back quoted, escaped quotes are re-escaped"""
    path = os.path.join(TEST_DIR, "valid2.json")
    result = subprocess.run([sys.executable, SCRIPT, path], capture_output=True, text=True)
    assert result.stdout == (
        "{\n"
        '  key: "value",\n'
        '  key2: "value with \\"quotes\\"",\n'
        '  "call sign": "viper"\n'
        "}\n"
    )
