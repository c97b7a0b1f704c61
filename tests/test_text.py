from app.core.text import sanitize_filename, slugify


def test_slugify_strips_punctuation_and_joins_words():
    assert slugify("Advanced React: Hooks & Context API!") == "advanced-react-hooks-context-api"


def test_slugify_collapses_whitespace_and_hyphens():
    assert slugify("  Hello   --  World  ") == "hello-world"


def test_slugify_drops_edge_hyphens():
    assert slugify("--Python 101--") == "python-101"


def test_sanitize_filename_replaces_unsafe_characters():
    assert sanitize_filename("my file with spaces & symbols!.pdf") == "my_file_with_spaces___symbols_.pdf"


def test_sanitize_filename_keeps_safe_characters():
    assert sanitize_filename("report-2024.v2.pdf") == "report-2024.v2.pdf"
