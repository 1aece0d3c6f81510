import pytest

from algodrills.filesystem import FileSystem


@pytest.fixture
def fs():
    return FileSystem()


def test_empty_root_lists_nothing(fs):
    assert fs.ls("/") == []


def test_mkdir_creates_nested_directories(fs):
    fs.mkdir("/a/b/c")
    assert fs.ls("/") == ["a"]
    assert fs.ls("/a") == ["b"]
    assert fs.ls("/a/b") == ["c"]
    assert fs.ls("/a/b/c") == []


def test_file_content_round_trip(fs):
    fs.mkdir("/a/b/c")
    fs.add_content_to_file("/a/b/c/d", "hello")
    assert fs.ls("/a/b/c") == ["d"]
    assert fs.ls("/a/b/c/d") == ["d"]
    assert fs.read_content_from_file("/a/b/c/d") == "hello"


def test_content_is_appended(fs):
    fs.add_content_to_file("/notes", "first")
    fs.add_content_to_file("/notes", "second")
    assert fs.read_content_from_file("/notes") == "first" + "second"


def test_directory_listing_is_sorted(fs):
    for name in ["zeta", "alpha", "mid"]:
        fs.mkdir("/" + name)
    listing = fs.ls("/")
    assert listing == sorted(listing)
    assert set(listing) == {"zeta", "alpha", "mid"}


def test_files_and_directories_listed_together(fs):
    fs.mkdir("/dir/sub")
    fs.add_content_to_file("/dir/file", "data")
    assert fs.ls("/dir") == ["file", "sub"]


def test_lookup_creates_missing_directory(fs):
    assert fs.ls("/ghost") == []
    assert fs.ls("/") == ["ghost"]


def test_repeated_and_trailing_slashes_are_ignored(fs):
    fs.add_content_to_file("//x//y/", "abc")
    assert fs.read_content_from_file("/x/y") == "abc"
    assert fs.ls("/x") == ["y"]