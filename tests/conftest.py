"""pytest 설정 및 공통 fixture."""

import pytest

from triplegen.config import Config
from triplegen.core.logging import run_id_var
from triplegen.generator.validator import GenerationSettings


@pytest.fixture(autouse=True)
def reset_config():
    """각 테스트 전/후에 Config 싱글톤 리셋."""
    Config.reset_instance()
    run_id_var.set(None)
    yield
    Config.reset_instance()


@pytest.fixture
def out_dir(tmp_path):
    """아직 존재하지 않는 출력 디렉토리 경로."""
    return tmp_path / "out"


@pytest.fixture
def small_settings():
    """10개 트리플, 2개 파일, 3/1/5 설정."""
    return GenerationSettings(
        num_triples=10,
        num_files=2,
        num_subjects=3,
        num_predicates=1,
        num_objects=5,
    )
