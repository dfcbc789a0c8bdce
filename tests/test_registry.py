import datetime

from duckworks.csv_reader import CSVReader
from duckworks.free_reader import FreeTextReader
from duckworks.json_reader import JSONReader
from duckworks.records import RubberDuckData
from duckworks.registry import get_readers


def test_known_extensions():
    assert set(get_readers()) == {"csv", "json", "txt"}


def test_keys_match_reader_extensions():
    for extension, reader in get_readers().items():
        assert reader.supported_file_extension() == extension


def test_reader_types():
    kinds = {extension: type(reader) for extension, reader in get_readers().items()}
    assert kinds == {"csv": CSVReader, "json": JSONReader, "txt": FreeTextReader}


def test_fresh_instances_each_call():
    first = get_readers()
    second = get_readers()
    assert all(first[key] is not second[key] for key in first)


def test_dispatch_by_suffix(tmp_path):
    path = tmp_path / "sightings.json"
    path.write_text(
        '[{"latitude": 51.5074, "longitude": -0.1278, "date": "2024-09-10"}]',
        encoding="utf-8",
    )
    data = RubberDuckData()
    get_readers()[path.suffix.lstrip(".")].read_file(data, path)
    assert data.dates() == [datetime.date(2024, 9, 10)]