"""디렉토리 준비, 매니페스트, 생성 실행 테스트."""

from datetime import datetime, timedelta, timezone

import pytest
from rdflib import Graph

from triplegen.core.exceptions import UserInputError
from triplegen.generator.runner import (
    delete_directory_contents,
    generate,
    prepare_directory,
    write_manifest,
)
from triplegen.generator.validator import check_counts


class TestPrepareDirectory:
    """prepare_directory 테스트."""

    def test_creates_missing_directory(self, out_dir):
        """없는 디렉토리는 생성."""
        result = prepare_directory(out_dir)
        assert result == out_dir
        assert out_dir.is_dir()

    def test_relative_path_is_absolute(self, tmp_path, monkeypatch):
        """상대 경로는 절대 경로로."""
        monkeypatch.chdir(tmp_path)
        result = prepare_directory("relative_out")
        assert result.is_absolute()
        assert result == tmp_path / "relative_out"

    def test_missing_parent(self, tmp_path):
        """부모 디렉토리 없음."""
        target = tmp_path / "missing" / "out"
        with pytest.raises(UserInputError) as exc_info:
            prepare_directory(target)
        assert exc_info.value.message == f"Can't create {target}: no parent directory."
        assert not target.exists()

    def test_exists_without_overwrite(self, out_dir):
        """OVERWRITE 없이 이미 존재."""
        out_dir.mkdir()
        (out_dir / "keep.nt").write_text("x\n", encoding="utf-8")
        with pytest.raises(UserInputError) as exc_info:
            prepare_directory(out_dir)
        assert exc_info.value.message == f"{out_dir} already exists -- specify OVERWRITE"
        assert (out_dir / "keep.nt").exists()

    def test_exists_with_overwrite(self, out_dir):
        """OVERWRITE 시 숨김 항목 외 삭제."""
        out_dir.mkdir()
        (out_dir / "triples001.nt").write_text("x\n", encoding="utf-8")
        (out_dir / "nested").mkdir()
        (out_dir / "nested" / "a.txt").write_text("a", encoding="utf-8")
        (out_dir / ".hidden").write_text("h", encoding="utf-8")

        prepare_directory(out_dir, overwrite=True)

        assert sorted(p.name for p in out_dir.iterdir()) == [".hidden"]

    def test_path_is_a_file(self, tmp_path):
        """파일 경로는 거부."""
        target = tmp_path / "file.txt"
        target.write_text("x", encoding="utf-8")
        with pytest.raises(UserInputError, match="is not a directory"):
            prepare_directory(target, overwrite=True)


class TestDeleteDirectoryContents:
    """delete_directory_contents 테스트."""

    def test_returns_removed_count(self, tmp_path):
        """삭제 개수 반환."""
        for name in ("a", "b", ".c"):
            (tmp_path / name).write_text(name, encoding="utf-8")
        assert delete_directory_contents(tmp_path) == 2


class TestWriteManifest:
    """write_manifest 테스트."""

    def test_two_lines(self, tmp_path):
        """시각 + 인자 목록."""
        now = datetime(2024, 3, 1, 12, 30, 5, tzinfo=timezone(timedelta(hours=9)))
        path = write_manifest(tmp_path, ["/tmp/out", "10", "2", "3", "1", "5"], now=now)
        assert path.name == "__MANIFEST.txt"
        assert path.read_text(encoding="utf-8").splitlines() == [
            "2024-03-01 12:30:05 +0900",
            "/tmp/out 10 2 3 1 5",
        ]

    def test_default_timestamp(self, tmp_path):
        """기본값은 현재 시각."""
        path = write_manifest(tmp_path, ["a"], manifest_name="MANIFEST")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        datetime.strptime(lines[0], "%Y-%m-%d %H:%M:%S %z")


class TestGenerate:
    """generate 테스트."""

    def test_small_scenario(self, tmp_path, small_settings):
        """10개 트리플 -> 5줄씩 2개 파일."""
        result = generate(tmp_path, small_settings)
        assert result.file_count == 2
        assert result.line_counts == [5, 5]
        assert result.total_triples == 10
        first = (tmp_path / "triples001.nt").read_text(encoding="utf-8").splitlines()
        assert first[0] == "<http://my.graph#r1> <http://my.graph#p1> <http://my.graph#r1> ."

    @pytest.mark.parametrize(
        "triples, files, subjects, predicates, objects",
        [
            (10, 3, 3, 1, 5),
            (10, 6, 3, 1, 5),
            (105, 4, 3, 5, 7),
            (100, 7, 11, 3, 7),
            (13, 13, 2, 3, 5),
        ],
    )
    def test_partition_properties(self, tmp_path, triples, files, subjects, predicates, objects):
        """총 줄 수, 파일당 상한, 짧은 파일 최대 1개, 파일 수 상한."""
        settings = check_counts(triples, files, subjects, predicates, objects)
        result = generate(tmp_path, settings)

        counts = [
            len(path.read_text(encoding="utf-8").splitlines()) for path in result.files
        ]
        assert counts == result.line_counts
        assert sum(counts) == triples
        assert max(counts) <= settings.lines_per_file
        assert sum(1 for c in counts if c < settings.lines_per_file) <= 1
        assert len(result.files) <= files

    def test_output_parses_as_ntriples(self, tmp_path):
        """rdflib로 읽으면 중복 없는 트리플 수와 같음."""
        settings = check_counts(105, 4, 3, 5, 7)
        result = generate(tmp_path, settings)

        graph = Graph()
        for path in result.files:
            graph.parse(str(path), format="nt")
        assert len(graph) == 105

    def test_reproducible(self, tmp_path, small_settings):
        """같은 설정은 같은 파일 내용."""
        (tmp_path / "a").mkdir()
        (tmp_path / "b").mkdir()
        first = generate(tmp_path / "a", small_settings)
        second = generate(tmp_path / "b", small_settings)
        assert len(first.files) == len(second.files)
        for a, b in zip(first.files, second.files):
            assert a.read_bytes() == b.read_bytes()
