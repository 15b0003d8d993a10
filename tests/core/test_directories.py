"""Tests for core.directories module."""

import pytest

from core.directories import (
    DirectoryIndexError,
    MissingActiveDocumentError,
    add_saved_directory,
    as_selection,
    build_target_path,
    clean_saved_directories,
    default_selection,
    normalize_directory,
    remove_saved_directory,
    resolve_active_directory,
    selection_from_choice,
    should_create_directory,
    validate_default_directory,
)
from core.models import UseActiveDocumentDirectory, UseExplicitDirectory


class TestNormalizeDirectory:
    """Tests for normalize_directory function."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Transcripts/", "Transcripts"),
            ("/Transcripts", "Transcripts"),
            ("/Transcripts/", "Transcripts"),
            ("Transcripts///", "Transcripts"),
            ("///Transcripts", "Transcripts"),
            ("Notes\\YouTube", "Notes/YouTube"),
            ("  Transcripts  ", "Transcripts"),
            ("Notes/YouTube/", "Notes/YouTube"),
            ("C:\\Users\\Videos", "C:/Users/Videos"),
            ("", ""),
            ("   ", ""),
            ("/", ""),
        ],
    )
    def test_examples(self, raw, expected):
        """Test normalization of typical user input."""
        assert normalize_directory(raw) == expected

    def test_inner_separators_kept(self):
        """Test that interior slashes are not collapsed or removed."""
        assert normalize_directory("Notes//YouTube") == "Notes//YouTube"

    def test_leading_backslash_stripped(self):
        """Test that a leading backslash does not leave a leading slash."""
        assert normalize_directory("\\Transcripts\\") == "Transcripts"

    @pytest.mark.parametrize(
        "raw",
        [
            "/Transcripts/",
            "Notes\\YouTube",
            "\\\\server\\share",
            "/ Notes /",
            " \\ a \\ ",
            "Transcripts///",
            "\t/x/\n",
            "",
        ],
    )
    def test_idempotent(self, raw):
        """Test that normalizing twice is the same as normalizing once."""
        once = normalize_directory(raw)
        assert normalize_directory(once) == once

    def test_result_has_no_edge_separators(self):
        """Test that results never start or end with a separator."""
        for raw in ["\\a", "a\\", "/ a", "a /", " / "]:
            result = normalize_directory(raw)
            assert not result.startswith("/")
            assert not result.endswith("/")
            assert "\\" not in result


class TestSelections:
    """Tests for directory selection helpers."""

    def test_none_is_active_document(self):
        """Test that None selects the active document's directory."""
        assert as_selection(None) == UseActiveDocumentDirectory()

    def test_empty_string_is_explicit_root(self):
        """Test that "" stays an explicit root, not the current directory."""
        assert as_selection("") == UseExplicitDirectory("")

    def test_selection_passthrough(self):
        """Test that selections are returned unchanged."""
        selection = UseExplicitDirectory("Transcripts")
        assert as_selection(selection) is selection

    def test_dropdown_current_directory(self):
        """Test that the dropdown's empty value means current directory."""
        assert selection_from_choice("") == UseActiveDocumentDirectory()
        assert selection_from_choice(None) == UseActiveDocumentDirectory()

    def test_dropdown_specific_directory(self):
        """Test that a dropdown value selects that directory."""
        assert selection_from_choice("Transcripts") == UseExplicitDirectory("Transcripts")


class TestResolveActiveDirectory:
    """Tests for resolve_active_directory function."""

    def test_none_uses_document_directory(self):
        """Test deriving the directory from the active document."""
        assert resolve_active_directory(None, "Notes/CurrentFile.md") == "Notes"

    def test_nested_document(self):
        """Test that only the last path segment is dropped."""
        assert resolve_active_directory(None, "Notes/YouTube/Today.md") == "Notes/YouTube"

    def test_document_at_root(self):
        """Test that a root document resolves to the vault root."""
        assert resolve_active_directory(None, "RootFile.md") == ""

    def test_explicit_directory(self):
        """Test that an explicit directory wins over the active document."""
        assert resolve_active_directory("Transcripts", "Notes/CurrentFile.md") == "Transcripts"

    def test_explicit_directory_normalized(self):
        """Test that explicit directories are normalized."""
        assert resolve_active_directory("/Notes\\YouTube/", "Notes/CurrentFile.md") == "Notes/YouTube"

    def test_explicit_root(self):
        """Test that an explicit "" means the root, not the document directory."""
        assert resolve_active_directory("", "Notes/CurrentFile.md") == ""
        assert resolve_active_directory(UseExplicitDirectory(""), "Notes/CurrentFile.md") == ""

    def test_tagged_selections(self):
        """Test resolution with tagged selection values."""
        assert resolve_active_directory(UseActiveDocumentDirectory(), "Notes/a.md") == "Notes"
        assert resolve_active_directory(UseExplicitDirectory("Videos"), "Notes/a.md") == "Videos"

    def test_explicit_without_active_document(self):
        """Test that explicit directories do not need an open document."""
        assert resolve_active_directory("Transcripts", None) == "Transcripts"

    def test_missing_active_document_raises(self):
        """Test that the current directory cannot be derived without a document."""
        with pytest.raises(MissingActiveDocumentError):
            resolve_active_directory(None, None)

    def test_missing_active_document_is_value_error(self):
        """Test the error hierarchy for callers catching ValueError."""
        assert issubclass(MissingActiveDocumentError, ValueError)


class TestBuildTargetPath:
    """Tests for build_target_path function."""

    def test_with_directory(self):
        """Test joining a directory and filename."""
        assert build_target_path("Transcripts", "Video Title.md") == "Transcripts/Video Title.md"

    def test_root(self):
        """Test that the root leaves the filename unchanged."""
        assert build_target_path("", "Video Title.md") == "Video Title.md"

    def test_filename_untouched(self):
        """Test that filenames are not sanitized here."""
        assert build_target_path("A", "we?ird:name.md") == "A/we?ird:name.md"


class TestShouldCreateDirectory:
    """Tests for should_create_directory function."""

    def test_blank(self):
        """Test blank directories mean the vault root."""
        assert should_create_directory("") is False
        assert should_create_directory("   ") is False

    def test_named(self):
        """Test a named directory must be created."""
        assert should_create_directory("Transcripts") is True


class TestSavedDirectoryList:
    """Tests for saved directory list maintenance."""

    def test_add_appends_normalized(self, saved_directories):
        """Test that new directories are normalized and appended."""
        assert add_saved_directory(saved_directories, " /Archive/ ") is True
        assert saved_directories[-1] == "Archive"
        assert len(saved_directories) == 4

    def test_add_duplicate_ignored(self, saved_directories):
        """Test that duplicates (after normalization) leave the list unchanged."""
        before = list(saved_directories)
        assert add_saved_directory(saved_directories, "Transcripts") is False
        assert add_saved_directory(saved_directories, "/Transcripts/") is False
        assert add_saved_directory(saved_directories, "Notes\\YouTube") is False
        assert saved_directories == before

    def test_add_blank_ignored(self):
        """Test that blank directories are not saved."""
        directories = []
        assert add_saved_directory(directories, "   ") is False
        assert add_saved_directory(directories, "//") is False
        assert directories == []

    def test_add_preserves_order(self):
        """Test insertion order is preserved."""
        directories = []
        for path in ["b", "a", "c", "a"]:
            add_saved_directory(directories, path)
        assert directories == ["b", "a", "c"]

    def test_remove_at(self, saved_directories):
        """Test removing by index keeps the remaining order."""
        removed = remove_saved_directory(saved_directories, 1)
        assert removed == "Notes/YouTube"
        assert saved_directories == ["Transcripts", "Videos/Transcripts"]

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_remove_out_of_range(self, saved_directories, index):
        """Test that invalid indexes raise and leave the list untouched."""
        before = list(saved_directories)
        with pytest.raises(DirectoryIndexError):
            remove_saved_directory(saved_directories, index)
        assert saved_directories == before

    def test_remove_from_empty(self):
        """Test removing from an empty list."""
        with pytest.raises(IndexError):
            remove_saved_directory([], 0)

    def test_clean_saved_directories(self):
        """Test cleaning a persisted list."""
        raw = ["Transcripts", "", "Notes/YouTube", "   ", "/Transcripts/", "Notes\\YouTube"]
        assert clean_saved_directories(raw) == ["Transcripts", "Notes/YouTube"]


class TestDefaultDirectory:
    """Tests for default directory validation."""

    def test_valid_default(self, saved_directories):
        """Test a default that is still saved is kept."""
        assert validate_default_directory("Transcripts", saved_directories) == "Transcripts"

    def test_stale_default_cleared(self, saved_directories):
        """Test a default no longer saved is cleared."""
        assert validate_default_directory("Archive", saved_directories) is None

    def test_empty_default(self, saved_directories):
        """Test empty defaults are None."""
        assert validate_default_directory("", saved_directories) is None
        assert validate_default_directory(None, saved_directories) is None

    def test_default_selection(self, saved_directories):
        """Test the preselected directory."""
        assert default_selection("Transcripts", saved_directories) == UseExplicitDirectory(
            "Transcripts"
        )
        assert default_selection("Archive", saved_directories) == UseActiveDocumentDirectory()
        assert default_selection(None, []) == UseActiveDocumentDirectory()
