"""
새 템플릿의 기본 구조 (skeleton).

templates/default.py가 있으면 그 내용을 시드로 쓰고,
없으면 FALLBACK_TEMPLATE_SKELETON을 쓴다.
호출할 때마다 다시 읽는다 (default.py 수정이 바로 반영됨).
"""

from pathlib import Path

FALLBACK_TEMPLATE_SKELETON = """\
# Template for templater.
#
# render(context) receives a RenderContext and returns the new file's content.
#
# context.created_file.file_name              name without extension
# context.created_file.extension              extension with leading dot
# context.created_file.directory_folder_name  target folder name
# context.created_file.directory_path         target folder full path
# context.filename_with_extension             new file name as typed
# context.current_date                        datetime of the render
# context.author.name / context.author.email  from configuration (may be None)
# context.custom_options                      dict from configuration


def render(context):
    author = f"{context.author.name or ''} - {context.author.email or ''}"
    return f'''/**
 * This is a {context.filename_with_extension} file created with template! :)
 *
 * @author {author}
 * @since {context.current_date.date().isoformat()}
 */
'''
"""


def load_template_skeleton(default_template_path: Path) -> str:
    """
    기본 템플릿 구조 반환.

    Args:
        default_template_path: templates/default.py 경로

    Returns:
        default.py 내용 (있으면) 또는 내장 fallback 소스
    """
    if default_template_path.is_file():
        return default_template_path.read_text(encoding="utf-8")
    return FALLBACK_TEMPLATE_SKELETON
