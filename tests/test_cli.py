"""Tests for routetree.cli: entry point, ``routes`` and ``generate``."""

from pathlib import Path

import pytest

from routetree.cli import main


def _write(root: Path, relative: str, source: str = "export default function X() {}\n") -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")


@pytest.fixture
def pages(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    _write(root, "layout.tsx")
    _write(root, "page.tsx")
    _write(root, "stats/page.tsx")
    _write(root, "stats/progress/[exerciseName]/page.tsx")
    return root


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_generate_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--help"])
        assert exc_info.value.code == 0

    def test_missing_pages_dir(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "routetree" in capsys.readouterr().out


class TestRoutesCommand:
    def test_prints_table(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(pages)])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["PATH", "KIND", "SOURCE"]
        assert any(line.split() == ["/", "layout", "layout.tsx"] for line in lines)
        assert any(line.split() == ["/stats", "page", "stats/page.tsx"] for line in lines)
        assert any(
            line.split()[:2] == ["/stats/progress/:exerciseName", "page"] for line in lines
        )
        assert lines[-1].split()[:2] == ["/*", "fallback"]

    def test_base_path(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(pages), "--base-path", "/app"])
        out = capsys.readouterr().out
        assert "/app/stats" in out

    def test_missing_root_layout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _write(tmp_path, "page.tsx")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Root layout not found" in capsys.readouterr().err

    def test_missing_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_strict_duplicate(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        _write(pages, "stats/index.tsx")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(pages), "--strict"])
        assert exc_info.value.code == 1
        assert "Duplicate page" in capsys.readouterr().err


class TestGenerateCommand:
    def test_stdout(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", str(pages)])
        out = capsys.readouterr().out
        assert "export const generatedRoutes" in out
        assert 'path: ":exerciseName"' in out

    def test_output_file(self, pages: Path, tmp_path: Path) -> None:
        target = tmp_path / "src" / "routes.generated.ts"
        main(["generate", str(pages), "-o", str(target), "--import-prefix", "./pages/"])
        text = target.read_text(encoding="utf-8")
        assert 'from "./pages/layout";' in text
        assert 'from "./pages/stats/progress/[exerciseName]/page";' in text


class TestRoutesKinds:
    def test_layout_without_default_export(
        self, pages: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _write(pages, "stats/layout.tsx", "export async function loader() {\n  return null;\n}\n")
        main(["routes", str(pages)])
        lines = capsys.readouterr().out.splitlines()
        assert any(line.split() == ["/stats", "layout", "stats/layout.tsx"] for line in lines)
        assert any(line.split() == ["/stats/progress", "group"] for line in lines)


class TestUnreadablePages:
    def test_invalid_utf8_exits_one(self, pages: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (pages / "page.tsx").write_bytes(b"export default \xff\xfe\n")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(pages)])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: Cannot read")
        assert "page.tsx" in err
