"""Скрипт для генерации временного URL к объекту OBS"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from obs_presign.config import Configuration
from obs_presign.errors import PresignStatus
from obs_presign.models.types import HttpMethod, PresignRequest
from obs_presign.presigner import ObsPresigner
from obs_presign.utils.logging import SecretFilter, setup_logging

logger = logging.getLogger(__name__)


def _parse_param(raw: str) -> Tuple[str, str]:
    """Разбирает параметр вида NAME=VALUE"""
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f"параметр должен иметь вид NAME=VALUE: {raw!r}"
        )
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Сгенерировать временный URL для объекта в бакете OBS"
    )
    parser.add_argument(
        "key",
        type=str,
        help="Ключ объекта в бакете",
    )
    parser.add_argument(
        "-m",
        "--method",
        type=str.upper,
        choices=[m.value for m in HttpMethod],
        default=HttpMethod.GET.value,
        help="HTTP метод, который разрешает URL (по умолчанию GET)",
    )
    parser.add_argument(
        "-e",
        "--expires",
        type=int,
        default=None,
        help="Время жизни URL в секундах (по умолчанию из конфигурации)",
    )
    parser.add_argument(
        "--version-id",
        type=str,
        default=None,
        help="Версия объекта",
    )
    parser.add_argument(
        "--content-type",
        type=str,
        default=None,
        help="Content-Type, только для -m PUT (передается параметром запроса)",
    )
    parser.add_argument(
        "-p",
        "--param",
        type=_parse_param,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Дополнительный параметр запроса (можно указывать несколько раз)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Минимальный вывод (только URL или ошибка)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.content_type and args.method != HttpMethod.PUT.value:
        parser.error("--content-type допустим только с -m PUT")
    config = Configuration()

    log_level = "WARNING" if args.quiet else config.log_level
    setup_logging(level=log_level)
    SecretFilter.register_secret(config.key_secret)

    query_params: List[Tuple[str, str]] = list(args.param)
    if args.content_type:
        query_params.append(("Content-Type", args.content_type))

    request = PresignRequest(
        key=args.key,
        method=HttpMethod(args.method),
        expires=args.expires if args.expires is not None else config.default_expires,
        version_id=args.version_id,
        query_params=tuple(query_params),
    )

    presigner = ObsPresigner(config.bucket_context())
    result = presigner.presign(request)
    if result.status is not PresignStatus.OK:
        logger.error(f"Не удалось сгенерировать URL: {result.error_message}")
        return 1

    print(result.url)
    if not args.quiet:
        logger.info(f"URL действителен до {result.expires_timestamp} (epoch)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
