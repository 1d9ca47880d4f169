#!/usr/bin/env python3
"""
templater.py - 템플릿 관리 / 템플릿 기반 파일 생성 CLI

명령:
- new-template: 새 템플릿 만들기 (templates/default.py 또는 기본 구조로 시드)
- new-file: 템플릿으로 새 파일 만들기
- list: 템플릿 목록
- open: templates 디렉터리를 파일 탐색기로 열기

설정: templater.yaml (TEMPLATER_CONFIG) + 환경변수
- TEMPLATER_TEMPLATES_DIR, TEMPLATER_AUTHOR_NAME, TEMPLATER_AUTHOR_EMAIL

사용법:
    # 새 템플릿 (이름 생략 시 입력 받음)
    uv run python scripts/templater.py new-template component

    # 템플릿으로 새 파일 (템플릿 생략 시 목록에서 선택)
    uv run python scripts/templater.py new-file Button.tsx --template component --dir src/ui

    # 목록 / 폴더 열기
    uv run python scripts/templater.py list
    uv run python scripts/templater.py open
"""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from src.app.services.templater import Templater
from src.domain.errors import TemplateNotFoundError, TemplaterError

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

Prompt = Callable[[str], str]


def prompt_template_name(templater: Templater, prompt: Prompt) -> str:
    """템플릿 목록을 보여주고 하나를 선택받는다."""
    templates = templater.templates()
    if not templates:
        raise TemplateNotFoundError("No templates available, create one with 'new-template'.")

    for index, template in enumerate(templates, start=1):
        print(f"  {index}. {template.name} ({template.filename})")

    answer = prompt("Select a template (number or name): ").strip()
    if answer.isdigit() and 1 <= int(answer) <= len(templates):
        return templates[int(answer) - 1].name
    return answer


def cmd_new_template(templater: Templater, args: argparse.Namespace, prompt: Prompt) -> int:
    name = args.name or prompt("Template name: ").strip()
    path = templater.new_template(name)
    print(path)
    return 0


def cmd_new_file(templater: Templater, args: argparse.Namespace, prompt: Prompt) -> int:
    template_name = args.template or prompt_template_name(templater, prompt)
    path = templater.new_file(args.file_name, template_name, Path(args.dir))
    print(path)
    return 0


def cmd_list(templater: Templater, args: argparse.Namespace, prompt: Prompt) -> int:
    for template in templater.templates():
        print(f"{template.name}\t{template.path}")
    return 0


def cmd_open(templater: Templater, args: argparse.Namespace, prompt: Prompt) -> int:
    print(templater.open_templates_dir())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="템플릿 관리 / 템플릿 기반 파일 생성",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_template = subparsers.add_parser("new-template", help="새 템플릿 만들기")
    new_template.add_argument("name", nargs="?", help="템플릿 이름 (확장자 제외)")
    new_template.set_defaults(handler=cmd_new_template)

    new_file = subparsers.add_parser("new-file", help="템플릿으로 새 파일 만들기")
    new_file.add_argument("file_name", help="새 파일명 (확장자 포함)")
    new_file.add_argument("--template", "-t", help="템플릿 이름")
    new_file.add_argument("--dir", "-d", default=".", help="파일을 만들 디렉터리 (기본: 현재)")
    new_file.set_defaults(handler=cmd_new_file)

    list_parser = subparsers.add_parser("list", help="템플릿 목록")
    list_parser.set_defaults(handler=cmd_list)

    open_parser = subparsers.add_parser("open", help="templates 디렉터리 열기")
    open_parser.set_defaults(handler=cmd_open)

    return parser


def main(
    argv: list[str] | None = None,
    templater: Templater | None = None,
    prompt: Prompt = input,
) -> int:
    args = build_parser().parse_args(argv)
    templater = templater or Templater()

    try:
        return args.handler(templater, args, prompt)
    except TemplaterError as e:
        print(f"[{e.code}] {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
