"""명령행 진입점.

사용법:
    ld4l-generate-triples <dir> <num_triples> <num_files> <num_subjects> <num_predicates> <num_objects> [OVERWRITE]
    ld4l-generate-triples /tmp/out 10 2 3 1 5
    ld4l-generate-triples /tmp/out 10 2 3 1 5 OVERWRITE --log-level INFO
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from triplegen.config import DEFAULT_CONFIG_DIR, Config
from triplegen.core.exceptions import UserInputError
from triplegen.core.logging import get_logger, set_run_id, setup_logging
from triplegen.generator.runner import generate, prepare_directory, write_manifest
from triplegen.generator.validator import USAGE_TEXT, validate

logger = get_logger(__name__)

OVERWRITE_FLAG = "OVERWRITE"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ld4l-generate-triples",
        description="Generate files of meaningless, duplicate-free N-Triples",
        epilog=USAGE_TEXT,
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        help="<dir> <num_triples> <num_files> <num_subjects> <num_predicates> <num_objects> [OVERWRITE]",
    )
    parser.add_argument("--config-dir", default=str(DEFAULT_CONFIG_DIR), help="Config directory")
    parser.add_argument("--log-level", default=None, help="Override logging level")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    parser.add_argument(
        "--json-logs",
        dest="json_logs",
        action="store_true",
        default=None,
        help="JSON formatted logs",
    )
    parser.add_argument(
        "--plain-logs",
        dest="json_logs",
        action="store_false",
        help="Plain text logs",
    )
    return parser


def split_overwrite_flag(arguments: Sequence[str]) -> tuple:
    """OVERWRITE 플래그를 위치와 무관하게 분리."""
    remaining = [a for a in arguments if a != OVERWRITE_FLAG]
    return remaining, len(remaining) != len(arguments)


def print_error(message: str) -> None:
    print()
    print(f"ERROR: {message}")
    print()


def run(arguments: Sequence[str], config: Optional[Config] = None) -> int:
    """한 번의 생성 실행.

    Args:
        arguments: 디렉토리, 다섯 개의 개수, 선택적 OVERWRITE

    Returns:
        종료 코드 (성공 0)
    """
    config = config or Config.get_instance()
    output = config.output
    args, overwrite = split_overwrite_flag(arguments)

    try:
        if len(args) != 6:
            raise UserInputError(USAGE_TEXT)
        settings = validate(args[1:])
        dir_path = prepare_directory(args[0], overwrite)
    except UserInputError as e:
        logger.info(f"Rejected arguments: {e.message}", extra={"extra_fields": e.to_dict()})
        print_error(e.message)
        return e.exit_code

    print(f"dir = {dir_path}")
    print(settings.describe())

    write_manifest(dir_path, args, output.manifest_name)
    result = generate(
        dir_path,
        settings,
        namespace=output.namespace,
        file_pattern=output.file_pattern,
        encoding=output.encoding,
    )
    logger.info(f"Generation finished in {result.directory}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    opts = parser.parse_intermixed_args(argv)

    config = Config.get_instance(opts.config_dir)
    log_cfg = config.logging
    json_logs = log_cfg.json_format if opts.json_logs is None else opts.json_logs
    setup_logging(
        level=opts.log_level or log_cfg.level,
        log_file=opts.log_file or log_cfg.file,
        max_bytes=log_cfg.max_bytes,
        backup_count=log_cfg.backup_count,
        json_format=json_logs,
    )
    set_run_id()

    return run(opts.arguments, config)


if __name__ == "__main__":
    raise SystemExit(main())
