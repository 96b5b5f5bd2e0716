"""Pipeline orchestration: per-document transformation and full vault builds"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from nodig.core.backlinks import extract_backlinks
from nodig.core.frontmatter import parse_frontmatter
from nodig.core.links import resolve_links
from nodig.core.models import BuildResult, ParsedDocument
from nodig.core.navigation import build_navigation_tree
from nodig.core.plugins import PluginHost, call_hook, get_hook, plugin_name
from nodig.core.tags import build_tag_index
from nodig.core.vault import load_documents, pages_from_documents


logger = logging.getLogger(__name__)

_NO_RESULT = object()


async def _isolated(plugin: object, name: str, *args) -> Any:
    """Run one document-level hook; failures are logged and yield _NO_RESULT."""
    hook = get_hook(plugin, name)
    if hook is None:
        return _NO_RESULT
    try:
        return await call_hook(hook, *args)
    except Exception:
        logger.warning("Plugin %s failed in %s", plugin_name(plugin), name, exc_info=True)
        return _NO_RESULT


async def atransform_content(markdown: str, plugins: Sequence[object] = ()) -> ParsedDocument:
    """Parse frontmatter, resolve links, and thread the body through plugin hooks.

    Hook order per plugin list: before_build -> transform_content -> after_build.
    A failing hook leaves the content as it was and the next plugin still runs.
    """
    for plugin in plugins:
        await _isolated(plugin, "before_build", {"markdown": markdown})

    parsed = parse_frontmatter(markdown)
    metadata = parsed.frontmatter
    content = resolve_links(parsed.content)

    for plugin in plugins:
        result = await _isolated(plugin, "transform_content", content, metadata)
        if result is _NO_RESULT:
            continue
        if not isinstance(result, str):
            logger.warning(
                "Plugin %s returned %s from transform_content, keeping previous content",
                plugin_name(plugin), type(result).__name__,
            )
            continue
        content = result

    for plugin in plugins:
        await _isolated(plugin, "after_build", {"content": content, "metadata": metadata})

    return ParsedDocument(frontmatter=metadata, content=content, used_fallback=parsed.used_fallback)


def transform_content(markdown: str, plugins: Sequence[object] = ()) -> ParsedDocument:
    """Synchronous atransform_content; not for use inside a running event loop."""
    return asyncio.run(atransform_content(markdown, plugins))


async def run_build(
    vault_dir: Path,
    plugins: Iterable[object] = (),
    sort_pages: bool = True,
    slugify_urls: bool = False,
    ) -> BuildResult:
    """Load a vault, transform every page, and index navigation, backlinks, and tags.

    Build-level hooks (on_build_start, on_vault_parsed, on_page_generated,
    on_build_end) run through PluginHost; any failure there aborts the build.

    on_vault_parsed may add, drop, or reorder pages. Pages backed by a vault
    file are re-transformed from that file's raw text, so content edits made
    there are discarded; use transform_content to change page bodies. Pages
    a plugin adds are transformed from their own content.
    """
    plugins = list(plugins)
    host = PluginHost(plugins)
    vault_dir = Path(vault_dir)

    await host.run_hook("on_build_start", {"vault_dir": vault_dir})

    docs = load_documents(vault_dir)
    if sort_pages:
        docs.sort(key=lambda d: d.path)
    context = {"pages": pages_from_documents(docs, slugify_urls)}
    await host.run_hook("on_vault_parsed", context)
    pages = list(context["pages"])
    logger.info("Parsed %d page(s) from %s", len(pages), vault_dir)

    docs_by_path = {d.path: d for d in docs}
    sources = [docs_by_path.get(p.path, p) for p in pages]
    backlinks = extract_backlinks(sources)

    generated = []
    for page, source in zip(pages, sources):
        raw = getattr(source, "raw_text", page.content)
        transformed = await atransform_content(raw, plugins)
        page = page.model_copy(update={
            "content": transformed.content,
            "frontmatter": transformed.frontmatter or page.frontmatter,
        })
        await host.run_hook("on_page_generated", {"page": page})
        generated.append(page)

    result = BuildResult(
        pages=generated,
        navigation=build_navigation_tree(p.path for p in generated),
        backlinks=backlinks,
        tags=build_tag_index(generated),
    )
    await host.run_hook("on_build_end", {"result": result})
    return result
