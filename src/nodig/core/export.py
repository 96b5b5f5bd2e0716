"""Export: write transformed pages, sidecar JSON, and site indexes for the renderer"""

import json
from pathlib import Path

import yaml

from nodig.core.models import BuildResult, Page


INDEX_DIR = "_site"
INDEX_NAMES = ("navigation", "backlinks", "tags")


def build_markdown(page: Page) -> str:
    """Return page content with its frontmatter re-emitted as a YAML header."""
    if not page.frontmatter:
        return page.content.rstrip('\n') + "\n"
    header = yaml.dump(page.frontmatter, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n\n{page.content.rstrip()}\n"


def build_sidecar(page: Page) -> dict:
    """Sidecar JSON: url, path, and JSON-safe frontmatter (dates -> ISO strings)."""
    return page.model_dump(mode='json', include={'url', 'path', 'frontmatter'})


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding='utf-8')
    return path


def write_page(page: Page, output_dir: Path) -> tuple[Path, Path]:
    """Write one page, mirroring its source path: output_dir / page.path (+ .json).

    Returns (markdown_path, json_path).
    """
    md_path = output_dir / page.path
    md_path.parent.mkdir(parents=True, exist_ok=True)
    md_path.write_text(build_markdown(page), encoding='utf-8')
    json_path = _write_json(md_path.with_suffix('.json'), build_sidecar(page))
    return md_path, json_path


def write_build(result: BuildResult, output_dir: Path) -> list[Path]:
    """Write every page, then navigation/backlinks/tags JSON under output_dir/_site/.

    The index directory is reserved; a page whose path falls inside it raises
    ValueError before anything is written. Returns written paths.
    """
    output_dir = Path(output_dir)
    reserved = [p.path for p in result.pages if p.path.replace('\\', '/').split('/')[0] == INDEX_DIR]
    if reserved:
        raise ValueError(f"Pages inside reserved directory '{INDEX_DIR}/': {', '.join(reserved)}")

    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for page in result.pages:
        written.extend(write_page(page, output_dir))

    index_dir = output_dir / INDEX_DIR
    index_dir.mkdir(exist_ok=True)
    data = result.model_dump(mode='json', exclude_none=True)
    for name in INDEX_NAMES:
        written.append(_write_json(index_dir / f"{name}.json", data[name]))
    return written
