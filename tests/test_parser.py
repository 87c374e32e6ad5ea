from datetime import date

import pytest

from euromillions.data.parser import load_history_file, parse_history
from euromillions.errors import InvalidFormatError

SAMPLE = """id;date;b1;b2;b3;b4;b5;s1;s2
3;14/01/2025;7;12;23;34;45;3;9
2;10/01/2025;1;2;3;4;5;1;2
short;row;1;2
4;31/02/2025;1;2;3;4;5;1;2
5;07/01/2025;1;2;x;4;5;1;2
6;03/01/2025;1;2;3;4;51;1;2
1;07/01/2025;10;20;30;40;50;11;12;extra;columns
"""


def test_parses_valid_rows_and_skips_the_rest():
    history = parse_history(SAMPLE)

    assert history.statistics.processed_rows == 3
    assert history.statistics.skipped_rows == 4
    assert history.draws == [[7, 12, 23, 34, 45], [1, 2, 3, 4, 5], [10, 20, 30, 40, 50]]
    assert history.stars == [[3, 9], [1, 2], [11, 12]]
    assert history.dates == [date(2025, 1, 14), date(2025, 1, 10), date(2025, 1, 7)]


@pytest.mark.parametrize("content", ["", "id;date;b1\n", "\n\n"])
def test_no_data_rows(content):
    with pytest.raises(InvalidFormatError):
        parse_history(content)


def test_without_header():
    history = parse_history("1;14/01/2025;7;12;23;34;45;3;9", has_header=False)
    assert history.draws == [[7, 12, 23, 34, 45]]


def test_custom_separator():
    history = parse_history("h\n1,14/01/2025,7,12,23,34,45,3,9", separator=",")
    assert history.stars == [[3, 9]]


def test_load_file(tmp_path, csv_text):
    path = tmp_path / "euromillions.csv"
    path.write_text(csv_text, encoding="utf-8")
    history = load_history_file(path)
    assert len(history.records) == 300
    assert history.statistics.skipped_rows == 0


def test_load_file_not_utf8(tmp_path):
    path = tmp_path / "euromillions.csv"
    path.write_bytes("id;date;b1\n1;14/01/2025;é\n".encode("latin-1"))
    with pytest.raises(InvalidFormatError, match="not UTF-8"):
        load_history_file(path)
