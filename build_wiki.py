#!/usr/bin/env python3
"""
Static wiki generator.

Features:
- Converts _pages/*.md to static/pages/<id>.html with a shared layout
- Home page with a search bar backed by an in-browser radix tree of page ids
- Theme colors and site title read from _config.json
- Optional watch mode: re-renders when _config.json or a page changes

Usage:
  python build_wiki.py --init ./my-wiki       # scaffold directories and config
  python build_wiki.py ./my-wiki              # render everything
  python build_wiki.py --watch ./my-wiki      # render, then re-render on change
  python build_wiki.py --search "rad" ./my-wiki

Notes:
- Requires the "markdown" package: pip install markdown
- Page front matter (optional), fenced by --- lines, sets the title and category:

    ---
    Title: Radix Trees
    Category: Data Structures
    ---
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
import time
from typing import Callable, Dict, List, Optional, Tuple

import markdown

from radix_tree import RadixTree
import wiki_templates


logger = logging.getLogger(__name__)

CONFIG_FILE = "_config.json"
PAGES_DIR = "_pages"
HTML_PAGES_DIR = os.path.join("static", "pages")
PAGES_HREF = "static/pages"


# -- configuration --
class WikiConfig:
    """Site title and theme colors, (de)serialized as _config.json."""

    DEFAULTS: Dict[str, str] = {
        "title": "Easy Wiki",
        "theme-background": "#242424",
        "theme-background2": "#363636",
        "theme-background3": "#484848",
        "theme-text": "#FFFFFF",
        "theme-primary": "#C588F9",
        "theme-secondary": "#5E9ED6",
        "theme-accent": "#F6C177",
    }

    def __init__(self, settings: Optional[Dict[str, str]] = None):
        self.settings: Dict[str, str] = dict(self.DEFAULTS)
        if settings:
            for key, value in settings.items():
                if key in self.DEFAULTS and isinstance(value, str):
                    self.settings[key] = value

    @property
    def title(self) -> str:
        return self.settings["title"]

    @classmethod
    def load(cls, path: Path) -> "WikiConfig":
        """Read path if present; defaults fill whatever is missing or invalid."""
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, using defaults: %s", path, exc)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", path)
            return cls()
        return cls(data)

    def to_json(self) -> str:
        return json.dumps(self.settings, indent=2)


# -- helpers: page ids and titles --
def page_id_from_filename(filename: str) -> Optional[str]:
    """Map 'Radix-Tree.md' to 'radix-tree'; None for anything that is not a .md page."""
    base, _, ext = filename.partition(".")
    if not base or ext.replace(".", "") != "md":
        return None
    return base.lower()


def name_to_title(page_id: str) -> str:
    """'radix-tree' -> 'Radix Tree'."""
    return " ".join(part[:1].upper() + part[1:] for part in page_id.split("-"))


def list_page_files(pages_dir: Path) -> List[Tuple[str, Path]]:
    """Return (page id, path) for each markdown page, sorted by filename."""
    found: List[Tuple[str, Path]] = []
    seen = set()
    for path in sorted(pages_dir.iterdir(), key=lambda p: p.name):
        if not path.is_file():
            continue
        page_id = page_id_from_filename(path.name)
        if page_id is None:
            continue
        if page_id in seen:
            logger.warning("Skipping %s: page id '%s' already used", path.name, page_id)
            continue
        seen.add(page_id)
        found.append((page_id, path))
    return found


def convert_markdown(md_text: str) -> Tuple[str, Dict[str, str]]:
    """Convert markdown to HTML and return (html, front matter).

    Front matter is only read from a block fenced by '---' lines at the very
    top. Keys are lower-cased; multi-line values are joined by spaces.
    """
    extensions = ["extra", "smarty"]
    if md_text.lstrip("\ufeff").startswith("---"):
        extensions.append("meta")
    md = markdown.Markdown(extensions=extensions)
    content_html = md.convert(md_text)
    meta = {key: " ".join(values).strip() for key, values in getattr(md, "Meta", {}).items()}
    return content_html, meta


# -- search (same contract as the browser search bar) --
def build_page_index(page_ids: List[str]) -> RadixTree:
    return RadixTree(page_ids)


def search_pages(tree: RadixTree, raw_query: str) -> List[Tuple[str, str]]:
    """Return (title, href) for each match; blank input gives no results."""
    query = raw_query.strip().lower()
    if not query:
        return []
    return [(name_to_title(page), f"{PAGES_HREF}/{page}.html") for page in tree.search(query)]


# -- generator --
class WikiBuilder:
    """Generates the static wiki under root."""

    def __init__(self, root: Path, config: Optional[WikiConfig] = None):
        self.root = root
        self.config = config if config is not None else WikiConfig.load(root / CONFIG_FILE)
        self.pages: List[str] = []
        self.category_to_pages: Dict[str, List[str]] = {}

    @property
    def pages_dir(self) -> Path:
        return self.root / PAGES_DIR

    @property
    def html_pages_dir(self) -> Path:
        return self.root / HTML_PAGES_DIR

    def _write(self, path: Path, text: str) -> bool:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", path, exc)
            return False
        return True

    def initialize(self) -> None:
        """Create config, directory structure and the static assets."""
        self.root.mkdir(parents=True, exist_ok=True)
        self.make_config()
        self.pages_dir.mkdir(exist_ok=True)
        self.html_pages_dir.mkdir(parents=True, exist_ok=True)
        self.render_index()
        self.render_css()
        self.render_js()

    def make_config(self) -> None:
        self._write(self.root / CONFIG_FILE, self.config.to_json())

    def render_all(self) -> None:
        self.render_index()
        self.render_pages()
        self.render_css()
        self.render_js()

    def render_index(self) -> None:
        body = wiki_templates.render_index_body(self.config.title)
        page = wiki_templates.render_layout(self.config.title, "styles.css", "index.html", body)
        self._write(self.root / "index.html", page)

    def render_pages(self) -> None:
        """Convert every markdown page and rebuild the page metadata."""
        self.pages = []
        self.category_to_pages = {}

        if not self.pages_dir.is_dir():
            logger.warning("No %s directory in %s", PAGES_DIR, self.root)
            return

        self.html_pages_dir.mkdir(parents=True, exist_ok=True)
        # drop output of pages that no longer exist
        for stale in self.html_pages_dir.glob("*.html"):
            stale.unlink()

        for page_id, md_path in list_page_files(self.pages_dir):
            try:
                md_text = md_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Could not read %s: %s", md_path, exc)
                continue

            try:
                content_html, meta = convert_markdown(md_text)
            except Exception:
                logger.exception("Could not convert %s", md_path)
                continue

            title = meta.get("title") or name_to_title(page_id)
            category = meta.get("category")

            page = wiki_templates.render_layout(
                title,
                "../../styles.css",
                "../../index.html",
                wiki_templates.render_page_body(content_html),
            )
            # only pages that made it to disk go into the search index
            if not self._write(self.html_pages_dir / f"{page_id}.html", page):
                continue

            self.pages.append(page_id)
            if category:
                self.category_to_pages.setdefault(category, []).append(page_id)

    def render_css(self) -> None:
        self._write(self.root / "styles.css", wiki_templates.render_css(self.config.settings))

    def render_js(self) -> None:
        bundle = wiki_templates.render_js(self.pages, self.category_to_pages)
        self._write(self.root / "bundle.js", bundle)


# -- watch mode --
def snapshot_sources(root: Path) -> Dict[str, float]:
    """Modification times of _config.json and everything in _pages."""
    snapshot: Dict[str, float] = {}
    candidates = [root / CONFIG_FILE]
    pages_dir = root / PAGES_DIR
    if pages_dir.is_dir():
        candidates.extend(p for p in pages_dir.iterdir() if p.is_file())
    for path in candidates:
        try:
            snapshot[str(path)] = path.stat().st_mtime
        except OSError:
            continue
    return snapshot


def watch(
    root: Path,
    interval: float = 1.0,
    max_cycles: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Poll sources and re-render the whole wiki when anything changes.

    Returns the number of re-renders. Runs until interrupted unless
    max_cycles is given.
    """
    last = snapshot_sources(root)
    renders = 0
    cycles = 0
    try:
        while max_cycles is None or cycles < max_cycles:
            sleep(interval)
            cycles += 1
            current = snapshot_sources(root)
            if current == last:
                continue
            changed = sorted(name for name in set(current) | set(last) if current.get(name) != last.get(name))
            for name in changed:
                logger.info("Changed: %s", name)
            last = current
            WikiBuilder(root).render_all()
            renders += 1
            logger.info("Wiki re-rendered")
    except KeyboardInterrupt:
        print("\nStopped watching.")
    return renders


# -- CLI --
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a static wiki from markdown pages.")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Wiki directory (default: current directory)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Generate _config.json, directory structure, and static web files",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch _config.json and the _pages directory and re-render on change",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between checks in watch mode (default: 1.0)",
    )
    parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Print pages whose id contains this text, as the search bar would",
    )
    parser.add_argument(
        "--print-index",
        action="store_true",
        help="Print the page index tree (debugging)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    args = parse_args(argv)
    root: Path = args.path.expanduser().resolve()
    print("Wiki path:", root)

    if args.init:
        WikiBuilder(root).initialize()
        print(f"Wiki initialized at: {root}")
        return

    if not root.is_dir():
        raise SystemExit(f"Wiki directory not found: {root}")

    if args.search is not None or args.print_index:
        pages_dir = root / PAGES_DIR
        page_ids = [page_id for page_id, _ in list_page_files(pages_dir)] if pages_dir.is_dir() else []
        tree = build_page_index(page_ids)
        if args.print_index:
            tree.print()
        if args.search is not None:
            for title, href in search_pages(tree, args.search):
                print(f"{title}\t{href}")
        return

    WikiBuilder(root).render_all()
    print(f"Wiki generated at: {root}")

    if args.watch:
        print("Watching for changes (Ctrl+C to stop)")
        watch(root, interval=args.interval)


if __name__ == "__main__":
    main()
