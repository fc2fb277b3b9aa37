"""Unit tests for install_file_tree."""

import os
import stat

import pytest

from fileutils.file_tree.entry import DirectoryEntry, FileEntry
from fileutils.file_tree.installer import install_file_tree
from fileutils.results import MALFORMED_ENTRY, Failure, Success


def permissions(path):
    return stat.S_IMODE(os.stat(path).st_mode)


def test_creating_a_tree_of_files(tmp_path, fox_entries, restore_permissions):
    """Test that names, contents and permissions are installed as described."""
    assert install_file_tree(tmp_path, fox_entries) == Success()

    fox = tmp_path / "fox"
    assert fox.is_dir()
    assert sorted(os.listdir(fox)) == ["brown", "quick", "the"]
    assert permissions(fox) == 0o500

    assert (fox / "the").read_bytes() == b"article"
    assert permissions(fox / "the") == 0o400
    assert (fox / "quick").read_bytes() == b"adjective"
    assert permissions(fox / "quick") == 0o644
    assert (fox / "brown").read_bytes() == b"adjective"
    assert permissions(fox / "brown") == 0o644

    jumps = tmp_path / "jumps"
    assert jumps.is_dir()
    assert os.listdir(jumps) == []
    assert permissions(jumps) == 0o755

    over = tmp_path / "over"
    assert os.listdir(over) == ["dog"]
    assert permissions(over) == 0o755

    dog = over / "dog"
    assert sorted(os.listdir(dog)) == ["lazy", "the"]
    assert permissions(dog) == 0o755
    assert (dog / "the").read_bytes() == b"article"
    assert permissions(dog / "the") == 0o400
    assert (dog / "lazy").read_bytes() == b"adjective"
    assert permissions(dog / "lazy") == 0o644


def test_binary_content_and_unusual_permissions(tmp_path, restore_permissions):
    result = install_file_tree(
        tmp_path,
        [
            DirectoryEntry(
                "test-data",
                children=[
                    FileEntry("data", b"\x00\x01\x02\x03\x04"),
                    FileEntry("read_only", b"\x04\x03\x02\x01\x00", permission=0o444),
                    FileEntry("no_access", b"\xff\xff", permission=0o000),
                    DirectoryEntry(
                        "subdir",
                        permission=0o555,
                        children=[FileEntry("more_data", "The quick brown fox...")],
                    ),
                ],
            )
        ],
    )
    assert result.ok

    data_dir = tmp_path / "test-data"
    assert (data_dir / "data").read_bytes() == b"\x00\x01\x02\x03\x04"
    assert permissions(data_dir / "read_only") == 0o444
    assert permissions(data_dir / "no_access") == 0o000
    assert os.path.getsize(data_dir / "no_access") == 2
    assert permissions(data_dir / "subdir") == 0o555
    assert (data_dir / "subdir" / "more_data").read_text() == "The quick brown fox..."


def test_directory_permission_applied_after_children(tmp_path, restore_permissions):
    """A directory without write permission can still be populated."""
    result = install_file_tree(
        tmp_path,
        [DirectoryEntry("locked", permission=0o000, children=[FileEntry("inside", "content")])],
    )
    assert result == Success()
    assert permissions(tmp_path / "locked") == 0o000

    os.chmod(tmp_path / "locked", 0o700)
    assert (tmp_path / "locked" / "inside").read_text() == "content"


def test_creating_a_file_twice_results_in_error(tmp_path):
    result = install_file_tree(tmp_path, [FileEntry("hello", "first"), FileEntry("hello", "second")])
    assert result == Failure("EEXIST", "hello")
    assert isinstance(result.error, FileExistsError)
    # The sibling created before the failure is left alone
    assert (tmp_path / "hello").read_text() == "first"


def test_creating_a_directory_twice_results_in_error(tmp_path):
    assert install_file_tree(tmp_path, [DirectoryEntry("world"), DirectoryEntry("world")]) == Failure(
        "EEXIST", "world"
    )


def test_nested_error_path_is_relative_to_root(tmp_path):
    result = install_file_tree(
        tmp_path,
        [
            DirectoryEntry(
                "over",
                children=[
                    DirectoryEntry("dog", children=[FileEntry("brown")]),
                    DirectoryEntry("dog", children=[FileEntry("black")]),
                ],
            )
        ],
    )
    assert result == Failure("EEXIST", os.path.join("over", "dog"))
    assert (tmp_path / "over" / "dog" / "brown").exists()
    assert not (tmp_path / "over" / "dog" / "black").exists()


def test_processing_stops_at_first_failure(tmp_path):
    result = install_file_tree(tmp_path, [FileEntry("a"), FileEntry("a"), FileEntry("b")])
    assert result == Failure("EEXIST", "a")
    assert not (tmp_path / "b").exists()


def test_root_directory_is_created(tmp_path):
    root = tmp_path / "does" / "not" / "exist"
    assert install_file_tree(root, [FileEntry("hello", "world")]) == Success()
    assert (root / "hello").read_text() == "world"


def test_existing_root_directory_is_reused(tmp_path):
    assert install_file_tree(tmp_path, [FileEntry("first")]).ok
    assert install_file_tree(tmp_path, [FileEntry("second")]).ok
    assert sorted(os.listdir(tmp_path)) == ["first", "second"]


def test_relative_root_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert install_file_tree("relative", [FileEntry("hello")]) == Success()
    assert install_file_tree("relative", [FileEntry("hello")]) == Failure("EEXIST", "hello")
    assert (tmp_path / "relative" / "hello").exists()


def test_root_path_is_a_file_results_in_error(tmp_path):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("")
    assert install_file_tree(not_a_dir, [FileEntry("hello")]) == Failure("EEXIST", "")


def test_failure_to_create_the_root_directory_results_in_an_error(tmp_path, non_root, restore_permissions):
    read_only_dir = tmp_path / "read_only_dir"
    read_only_dir.mkdir()
    read_only_dir.chmod(0o500)

    assert install_file_tree(read_only_dir / "install_dir", [FileEntry("hello")]) == Failure("EACCES", "")


def test_permission_denied_inside_root(tmp_path, non_root, restore_permissions):
    tmp_path.joinpath("read_only_dir").mkdir(mode=0o500)

    result = install_file_tree(tmp_path, [DirectoryEntry("read_only_dir", children=[FileEntry("hello")])])
    assert result == Failure("EEXIST", "read_only_dir")

    result = install_file_tree(tmp_path / "read_only_dir", [FileEntry("hello")])
    assert result == Failure("EACCES", "hello")


@pytest.mark.parametrize(
    "entry",
    [
        ("goodbye", "cruel", "world"),
        ("foo",),
        "foo",
        None,
        {"fox": []},
        FileEntry("", "no name"),
        FileEntry("over/dog", "not a single segment"),
        FileEntry("foo", 42),  # type: ignore[arg-type]
    ],
)
def test_invalid_file_tree_description_results_in_an_error(tmp_path, entry):
    """The failure carries the offending value itself, not a path."""
    result = install_file_tree(tmp_path, [entry])
    assert result == Failure(MALFORMED_ENTRY, entry)
    assert result.detail is entry
    assert os.listdir(tmp_path) == []


@pytest.mark.parametrize("permission", [0o1000, -1, True, "0o644"])
def test_out_of_range_permissions_result_in_an_error(tmp_path, permission):
    file_entry = FileEntry("foo", "bar", permission=permission)
    assert install_file_tree(tmp_path, [file_entry]) == Failure(MALFORMED_ENTRY, file_entry)

    dir_entry = DirectoryEntry("foo", permission=permission)
    assert install_file_tree(tmp_path, [dir_entry]) == Failure(MALFORMED_ENTRY, dir_entry)

    assert not (tmp_path / "foo").exists()


def test_malformed_nested_entry_is_not_relativized(tmp_path):
    bad = ("dog", 0o755, "not an entry")
    result = install_file_tree(tmp_path, [DirectoryEntry("over", children=[FileEntry("fox"), bad])])

    assert result == Failure(MALFORMED_ENTRY, bad)
    # Entries processed before the malformed one stay on disk
    assert (tmp_path / "over" / "fox").exists()


def test_entries_must_not_be_a_string(tmp_path):
    with pytest.raises(TypeError):
        install_file_tree(tmp_path, "hello")  # type: ignore[arg-type]


def test_entries_can_be_any_iterable(tmp_path):
    assert install_file_tree(tmp_path, (FileEntry(name) for name in ["a", "b"])) == Success()
    assert sorted(os.listdir(tmp_path)) == ["a", "b"]


def test_empty_entry_list(tmp_path):
    assert install_file_tree(tmp_path / "empty", []) == Success()
    assert (tmp_path / "empty").is_dir()


def test_string_children_blame_the_directory(tmp_path):
    entry = DirectoryEntry("d", children="ab")  # type: ignore[arg-type]
    result = install_file_tree(tmp_path, [entry])

    assert result == Failure(MALFORMED_ENTRY, entry)
    assert result.detail is entry
    assert os.listdir(tmp_path) == []
