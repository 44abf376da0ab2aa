from unl2csv.extract.splitter import split_cells
from unl2csv.transform.transcoder import escape_delimiter, unescape_delimiter


def test_split_keeps_sentinel_cell():
    assert split_cells("1|Ann|") == ["1", "Ann", ""]


def test_split_ignores_escaped_delimiter():
    assert split_cells("12|Jane\\|Doe|") == ["12", "Jane\\|Doe", ""]


def test_split_empty_cells():
    assert split_cells("||") == ["", "", ""]


def test_split_other_delimiter():
    assert split_cells(r"a;b\;c;", ";") == ["a", r"b\;c", ""]


def test_unescape_then_escape_restores_cell():
    for cell in split_cells("12|Jane\\|Doe|a\\|b\\|c|"):
        assert escape_delimiter(unescape_delimiter(cell)) == cell
