#!/usr/bin/env python3
"""
Command line access to the Kakao builders.

Examples:
    kakao-client book "오브젝트" --size 5 --pages 2 --save books.json --key $KEY
    kakao-client detect "안녕하세요" --method POST
    kakao-client translate "안녕하세요" --source kr --target en
    kakao-client face --file portrait.jpg --threshold 0.8

The REST API key is read from --key or KAKAO_REST_API_KEY (a .env file is loaded first).
"""

import argparse
import logging
import sys

from kakao_client.adapters.config import KakaoConfig, load_env
from kakao_client.api.daum import book_search
from kakao_client.api.daum.core import SORT_ORDERS, TARGETS
from kakao_client.api.translation import LANGUAGES, detect_language, translate
from kakao_client.api.vision import face_detect
from kakao_client.contracts.errors import KakaoError
from kakao_client.utils.get_logger import get_logger, log_to_file, set_level

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--key", help="REST API key (default: $KAKAO_REST_API_KEY)")
    common.add_argument("--save", metavar="PATH", help="save the result as JSON to PATH")
    common.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    common.add_argument("--log-file", metavar="PATH", help="also write logs to PATH")

    parser = argparse.ArgumentParser(prog="kakao-client", description="Kakao REST API client")
    sub = parser.add_subparsers(dest="command", required=True)

    book = sub.add_parser("book", parents=[common], help="Daum book search")
    book.add_argument("query")
    book.add_argument("--sort", choices=SORT_ORDERS, default="accuracy")
    book.add_argument("--page", type=int, default=1)
    book.add_argument("--size", type=int, default=10)
    book.add_argument("--target", choices=[t for t in TARGETS if t], default="")
    book.add_argument("--pages", type=int, default=1, help="number of pages to collect")

    detect = sub.add_parser("detect", parents=[common], help="detect the language of a text")
    detect.add_argument("query")
    detect.add_argument("--method", choices=["GET", "POST"], default="GET")

    trans = sub.add_parser("translate", parents=[common], help="translate a text")
    trans.add_argument("query")
    trans.add_argument("--source", choices=sorted(LANGUAGES), required=True)
    trans.add_argument("--target", choices=sorted(LANGUAGES), required=True)
    trans.add_argument("--method", choices=["GET", "POST"], default="POST")

    face = sub.add_parser("face", parents=[common], help="detect faces in an image")
    image = face.add_mutually_exclusive_group(required=True)
    image.add_argument("--url")
    image.add_argument("--file")
    face.add_argument("--threshold", type=float, default=0.7)

    return parser


def run(args: argparse.Namespace, config: KakaoConfig):
    if args.command == "book":
        pages = (
            book_search(args.query, config=config)
            .sort_by(args.sort)
            .result(args.page)
            .display(args.size)
            .filter(args.target)
        )
        if args.key:
            pages.authorize_with(args.key)
        return pages.collect(max_pages=args.pages)

    if args.command == "detect":
        detector = detect_language(args.query, config=config)
        if args.key:
            detector.authorize_with(args.key)
        return detector.request_by(args.method)

    if args.command == "translate":
        translator = translate(args.query, config=config).source(args.source).target(args.target)
        if args.key:
            translator.authorize_with(args.key)
        return translator.request_by(args.method)

    detector = face_detect(config=config).threshold_at(args.threshold)
    if args.file:
        detector.with_file(args.file)
    else:
        detector.with_url(args.url)
    if args.key:
        detector.authorize_with(args.key)
    return detector.collect()


def main(argv: list[str] | None = None) -> int:
    load_env()
    args = build_parser().parse_args(argv)
    config = KakaoConfig.from_env()

    if args.verbose:
        set_level(logging.DEBUG)
    if args.log_file:
        log_to_file(args.log_file)

    try:
        result = run(args, config)
    except (KakaoError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(result)
    if args.save:
        try:
            path = result.save_as(args.save)
        except (KakaoError, OSError) as e:
            logger.error(f"Could not save result: {e}")
            return 1
        print(f"saved to {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
