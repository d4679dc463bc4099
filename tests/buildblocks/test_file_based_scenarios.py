import json
import os

import pytest

from buildblocks import scan

# Each scenario file is an HTML document and the expected block records,
# separated by a '# === RESULT ===' line.
TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
TEST_FILES_DIR = os.path.join(TESTS_DIR, "files")

test_files = []
if os.path.isdir(TEST_FILES_DIR):
    test_files = sorted(f for f in os.listdir(TEST_FILES_DIR) if f.endswith(".test.txt"))


@pytest.mark.parametrize("filename", test_files)
def test_blocks_from_file_scenario(filename):
    with open(os.path.join(TEST_FILES_DIR, filename), "r", encoding="utf-8") as f:
        content = f.read()

    try:
        document, expected_raw = content.split("\n# === RESULT ===\n", 1)
    except ValueError:
        pytest.fail(
            f"Test file '{filename}' is not in the expected format of "
            "DOCUMENT\\n# === RESULT ===\\nJSON"
        )

    result = scan(document)

    assert result.ok, result.message
    assert [b.to_dict() for b in result.blocks] == json.loads(expected_raw)
