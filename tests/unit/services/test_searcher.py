"""Tests for FileSearcher service."""

import io
from pathlib import Path

from pathutil.config.models import SearchConfig
from pathutil.services.resolver import NOT_FOUND, PathResolver
from pathutil.services.searcher import (
    FileSearcher,
    find_executable,
    find_file,
    parse_search_path,
)


class RecordingProbe:
    """Existence probe answering from a fixed set and recording calls."""

    def __init__(self, present: set[str]) -> None:
        self.present = present
        self.calls: list[str] = []

    def __call__(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.present


class TestParseSearchPath:
    """Test parse_search_path function."""

    def test_splits_in_order(self) -> None:
        assert parse_search_path("/usr/bin:/bin:/sbin") == ["/usr/bin", "/bin", "/sbin"]

    def test_drops_later_duplicates(self) -> None:
        assert parse_search_path("/b:/a:/b:/c:/a") == ["/b", "/a", "/c"]

    def test_empty_entry_is_current_directory(self) -> None:
        assert parse_search_path("/bin::/usr/bin:") == ["/bin", ".", "/usr/bin"]

    def test_empty_string(self) -> None:
        assert parse_search_path("") == []

    def test_custom_delimiter(self) -> None:
        assert parse_search_path("/a;/b;/a", delimiter=";") == ["/a", "/b"]


class TestFindFile:
    """Test FileSearcher.find_file."""

    def test_visits_duplicates_once(self) -> None:
        probe = RecordingProbe({"/bin/tool"})
        searcher = FileSearcher(exists=probe)

        result = searcher.find_file("tool", ["/usr/bin", "/usr/bin", "/bin"])

        assert result == "/bin/tool"
        assert probe.calls == ["/usr/bin/tool", "/bin/tool"]

    def test_string_search_path(self) -> None:
        probe = RecordingProbe({"/bin/tool"})
        searcher = FileSearcher(exists=probe)

        assert searcher.find_file("tool", "/usr/bin:/usr/bin:/bin") == "/bin/tool"
        assert probe.calls == ["/usr/bin/tool", "/bin/tool"]

    def test_first_match_wins(self) -> None:
        probe = RecordingProbe({"/a/tool", "/b/tool"})
        searcher = FileSearcher(exists=probe)

        assert searcher.find_file("tool", ["/a", "/b"]) == "/a/tool"
        assert probe.calls == ["/a/tool"]

    def test_result_is_normalized(self) -> None:
        probe = RecordingProbe({"/opt//x/../bin/tool"})
        searcher = FileSearcher(exists=probe)

        assert searcher.find_file("tool", ["/opt//x/../bin"]) == "/opt/bin/tool"

    def test_relative_directory_is_made_absolute(self) -> None:
        probe = RecordingProbe({"./tool"})
        searcher = FileSearcher(exists=probe, resolver=PathResolver(working_directory="/work"))

        assert searcher.find_file("tool", "/bin::") == "/work/tool"

    def test_not_found(self) -> None:
        searcher = FileSearcher(exists=RecordingProbe(set()))

        assert searcher.find_file("tool", ["/a", "/b"]) == NOT_FOUND

    def test_empty_name_does_not_probe(self) -> None:
        probe = RecordingProbe({"/a/"})
        searcher = FileSearcher(exists=probe)

        assert searcher.find_file("", ["/a"]) == NOT_FOUND
        assert probe.calls == []

    def test_empty_search_list(self) -> None:
        searcher = FileSearcher(exists=RecordingProbe({"/tool"}))

        assert searcher.find_file("tool", []) == NOT_FOUND
        assert searcher.find_file("tool", "") == NOT_FOUND

    def test_name_with_subdirectory(self, bin_tree: Path) -> None:
        result = find_file("first/data.txt", [str(bin_tree / "missing"), str(bin_tree)])

        assert result == f"{bin_tree}/first/data.txt"

    def test_real_filesystem(self, bin_tree: Path) -> None:
        first = str(bin_tree / "first")
        second = str(bin_tree / "second")

        assert find_file("tool", [first, second]) == f"{second}/tool"
        assert find_file("data.txt", f"{second}:{first}") == f"{first}/data.txt"


class TestFindExecutable:
    """Test FileSearcher.find_executable."""

    def test_uses_path_variable(self, bin_tree: Path) -> None:
        searcher = FileSearcher(
            environ={"PATH": f"{bin_tree}/first:{bin_tree}/second"},
        )

        assert searcher.find_executable("tool") == str((bin_tree / "second" / "tool").resolve())

    def test_missing_path_variable_fails_without_search(self) -> None:
        probe = RecordingProbe({"/bin/sh"})
        searcher = FileSearcher(environ={}, exists=probe)

        assert searcher.find_executable("sh") == NOT_FOUND
        assert probe.calls == []

    def test_empty_name_fails_without_search(self) -> None:
        probe = RecordingProbe(set())
        searcher = FileSearcher(environ={"PATH": "/bin"}, exists=probe)

        assert searcher.find_executable("") == NOT_FOUND
        assert probe.calls == []

    def test_configured_path_variable(self, bin_tree: Path) -> None:
        searcher = FileSearcher(
            config=SearchConfig(path_variable="TOOLCHAIN_PATH"),
            environ={"PATH": f"{bin_tree}/first", "TOOLCHAIN_PATH": f"{bin_tree}/second"},
        )

        assert searcher.find_executable("tool") == str((bin_tree / "second" / "tool").resolve())

    def test_first_match_must_be_executable(self) -> None:
        probe = RecordingProbe({"/a/tool", "/b/tool"})
        searcher = FileSearcher(
            exists=probe,
            is_executable=lambda path: path == "/b/tool",
        )

        assert searcher.find_executable("tool", ["/a", "/b"]) == NOT_FOUND
        assert probe.calls == ["/a/tool"]

    def test_sequence_form_is_normalized(self) -> None:
        searcher = FileSearcher(
            environ={"PATH": "/bin"},
            exists=RecordingProbe({"/bin/x", "/opt//x/../bin/x"}),
            is_executable=lambda path: True,
        )

        assert searcher.find_executable("x", ["/opt//x/../bin"]) == "/opt/bin/x"

    def test_string_form_resolves_symlinks(self, bin_tree: Path) -> None:
        link = bin_tree / "link"
        link.symlink_to(bin_tree / "second")

        result = find_executable("tool", str(link))

        assert result == str((bin_tree / "second" / "tool").resolve())

    def test_sequence_form_keeps_symlinks(self, bin_tree: Path) -> None:
        link = bin_tree / "link"
        link.symlink_to(bin_tree / "second")

        assert find_executable("tool", [str(link)]) == f"{link}/tool"

    def test_non_executable_file_shadows_later_executable(self, bin_tree: Path) -> None:
        shadow = bin_tree / "first" / "tool"
        shadow.write_text("not executable")
        shadow.chmod(0o644)
        first = str(bin_tree / "first")
        second = str(bin_tree / "second")

        assert find_executable("tool", f"{first}:{second}") == NOT_FOUND
        assert find_executable("tool", [first, second]) == NOT_FOUND
        assert find_file("tool", [first, second]) == f"{first}/tool"

    def test_real_filesystem(self, bin_tree: Path) -> None:
        first = str(bin_tree / "first")
        second = str(bin_tree / "second")

        assert find_executable("tool", f"{first}:{second}") == str(Path(second, "tool").resolve())
        assert find_executable("tool", [first, second]) == f"{second}/tool"
        assert find_executable("tool-plain", [first, second]) == NOT_FOUND

    def test_reads_process_environment(self, bin_tree: Path, monkeypatch) -> None:
        monkeypatch.setenv("PATH", str(bin_tree / "second"))

        assert find_executable("tool") == str((bin_tree / "second" / "tool").resolve())

    def test_unset_process_path(self, monkeypatch) -> None:
        monkeypatch.delenv("PATH", raising=False)

        assert find_executable("sh") == NOT_FOUND


class TestLogging:
    """Lookups are traced through loguru."""

    def test_logs_match(self, log_capture: io.StringIO) -> None:
        searcher = FileSearcher(exists=RecordingProbe({"/bin/tool"}))
        searcher.find_file("tool", ["/bin"])

        assert "Found tool at /bin/tool" in log_capture.getvalue()

    def test_logs_missing_path_variable(self, log_capture: io.StringIO) -> None:
        FileSearcher(environ={}).find_executable("sh")

        assert "PATH is not set" in log_capture.getvalue()

    def test_logs_non_executable_match(self, log_capture: io.StringIO) -> None:
        searcher = FileSearcher(
            exists=RecordingProbe({"/a/tool"}),
            is_executable=lambda path: False,
        )
        searcher.find_executable("tool", ["/a"])

        assert "/a/tool is not executable" in log_capture.getvalue()
