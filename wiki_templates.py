"""
Text templates for the generated wiki: page layout, home page body,
stylesheet and the client-side script bundle.

Each render_* function fills one template and returns the text; writing files
is left to build_wiki.py.
"""

from __future__ import annotations

import html
import json
from typing import Dict, List


def render_layout(title: str, css_path: str, index_path: str, body: str) -> str:
    """Render the shared HTML layout used by the home page and every page."""
    return f"""<!DOCTYPE html>
<html lang="en">

<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{html.escape(title)}</title>
  <link rel="stylesheet" href="{html.escape(css_path)}">
</head>

<body>
<div class="topnav">
  <a href="{html.escape(index_path)}">Home</a>
</div>
{body}
</body>
</html>"""


def render_index_body(site_title: str) -> str:
    return f"""<div class="center-content">
  <h1>{html.escape(site_title)}</h1>
  <div id="search-container">
    <input type="text" id="search-bar" placeholder="Search..." onkeyup="updateSearchResults();" autocomplete="off" autofocus="true">
    <div id="dropdown" class="dropdown-content">
    </div>
  </div>
</div>
<script src="bundle.js"></script>"""


def render_page_body(content_html: str) -> str:
    return f'<div class="page-content">\n{content_html.strip()}\n</div>'


def render_css(theme: Dict[str, str]) -> str:
    """Fill the stylesheet with the theme colors (keys as in _config.json)."""
    return f""":root {{
  --surface: {theme["theme-background"]};
  --surface2: {theme["theme-background2"]};
  --surface3: {theme["theme-background3"]};
  --onsurface: {theme["theme-text"]};
  --primary: {theme["theme-primary"]};
  --secondary: {theme["theme-secondary"]};
  --accent: {theme["theme-accent"]};
}}

*,
*::before,
*::after {{
  margin: 0;
  padding: 0;
  box-sizing: inherit;
  background-color: var(--surface);
  color: var(--onsurface);
}}

*:focus {{
  outline: 2px solid var(--secondary);
}}

html {{
  font-size: 62.5%;
}}

body {{
  box-sizing: border-box;
  font-size: 1.6rem;
  height: 100vh;
}}

p, h1, h2, h3, a {{
  opacity: 0.80;
  text-decoration: none;
  font-family: Helvetica, Verdana, sans-serif;
}}

.center-content {{
  height: 100%;
  display: flex;
  flex-direction: column;
  text-align: center;
  max-width: 640px;
  margin: auto;
  padding: 0px 10px;
}}

.center-content > h1 {{
  padding: 114px 32px 64px 32px;
  margin-bottom: 4px;
}}

#search-container {{
  border-radius: 24px;
}}

#search-bar {{
  background-color: var(--surface3);
  border-radius: 24px;
  border: none;
  height: 48px;
  width: 100%;
  padding: 0px 24px;
  font-size: 2.0rem;
}}

.dropdown-content {{
  background-color: rgba(0,0,0,0);
  text-align: left;
  width: 100%;
  margin-top: 4px;
}}

.dropdown-content > a {{
  background-color: rgba(0,0,0,0);
  display: inline-block;
  width: 100%;
  padding: 8px;
  font-weight: bold;
  border-radius: 6px;
  opacity: 0.60;
  margin-bottom: 4px;
}}

.dropdown-content > a:hover,
.dropdown-content > a:focus {{
  opacity: 0.87;
}}

.topnav {{
  position: fixed;
  top: 0px;
  display: flex;
  height: 48px;
  width: 100%;
  border-bottom: 1px solid var(--surface2);
  z-index: 10;
}}

.topnav > a {{
  align-content: center;
  text-align: center;
  min-width: 96px;
  font-weight: bold;
  opacity: 0.60;
  margin: 4px;
}}

.topnav > a:hover,
.topnav > a:focus {{
  opacity: 0.87;
}}

.page-content {{
  padding: 64px 16px;
  word-wrap: break-word;
  line-height: 1.5;
  max-width: 1012px;
  margin-right: auto;
  margin-left: auto;
}}

.page-content > :is(h1, h2, h3, h4, h5, h6) {{
  margin-top: 1.6rem;
  margin-bottom: 1.0rem;
}}

.page-content > p {{
  margin-top: 1.0rem;
  margin-bottom: 1.0rem;
}}

.page-content a {{
  color: var(--secondary);
  opacity: 1.0;
}}

.page-content a:hover {{
  color: var(--primary);
  text-decoration: underline;
}}

blockquote {{
  border-left: 6px solid var(--surface3);
  margin: 1.5em 10px;
  padding: 0.5em 10px;
}}

ul, ol {{
  margin: 0.5em 10px 1.0em 10px;
}}

li {{
  margin: 0.5em 10px;
}}

code {{
  font-family: "Lucida Console", Monaco, monospace;
  color: var(--accent);
  background: var(--surface2);
  border-radius: 4px;
  padding: 2px;
}}

pre {{
  display: block;
  background: var(--surface2);
  border-radius: 6px;
  padding: 16px;
  margin-bottom: 16px;
  overflow: auto;
  line-height: 1.45;
}}

img {{
  max-width: 100%;
}}

table {{
  display: block;
  width: max-content;
  max-width: 100%;
  overflow: auto;
  margin-bottom: 16px;
  border-collapse: collapse;
}}

tr:nth-child(even) {{ background-color: var(--surface2); }}

th, td {{
  padding: 6px 13px;
  border: 1px solid var(--surface3);
  background-color: rgba(0,0,0,0);
}}
"""


def encode_metadata(pages: List[str], category_to_pages: Dict[str, List[str]]) -> str:
    """Serialize the page record as a JS literal safe to inline in a script."""
    record = {"pages": pages, "categoryToPages": category_to_pages}
    # keep "</script>" inside a string from closing the tag
    return json.dumps(record).replace("</", "<\\/")


# Mirrors radix_tree.py: same insert/split rules, same result order.
JS_RADIX_TREE = """class RadixNode {
  constructor(edgeLabel, isWord = false) {
    this.edgeLabel = edgeLabel;
    this.children = new Map();
    this.isWord = isWord;
  }

  static longestCommonPrefix(a, b) {
    let i = 0;
    const n = Math.min(a.length, b.length);
    while (i < n && a[i] === b[i]) i++;
    return a.substring(0, i);
  }

  insert(word) {
    if (word === "") {
      this.isWord = true;
      return;
    }
    const child = this.children.get(word[0]);
    if (child === undefined) {
      this.children.set(word[0], new RadixNode(word, true));
      return;
    }
    const common = RadixNode.longestCommonPrefix(child.edgeLabel, word);
    if (common === child.edgeLabel) {
      if (common === word) child.isWord = true;
      else child.insert(word.substring(common.length));
      return;
    }
    const remainder = child.edgeLabel.substring(common.length);
    const rest = word.substring(common.length);
    const middle = new RadixNode(common, rest === "");
    child.edgeLabel = remainder;
    middle.children.set(remainder[0], child);
    if (rest !== "") middle.children.set(rest[0], new RadixNode(rest, true));
    this.children.set(word[0], middle);
  }

  collect(query, path, found) {
    path += this.edgeLabel;
    if (this.isWord && path.includes(query)) found.push(path);
    for (const child of this.children.values()) child.collect(query, path, found);
  }
}

class RadixTree {
  constructor() {
    this.root = new RadixNode("");
  }

  insert(word) {
    this.root.insert(word);
  }

  search(query) {
    const found = [];
    this.root.collect(query, "", found);
    return found.reverse();
  }
}"""


JS_SEARCH_BAR = """const pageTrie = new RadixTree();
const dropdown = document.getElementById("dropdown");
const searchContainer = document.getElementById("search-container");
const searchBar = document.getElementById("search-bar");

function capitalize(str) {
  return str ? str[0].toUpperCase() + str.substring(1) : str;
}

function nameToTitle(str) {
  return str.split("-").map(capitalize).join(" ");
}

function updateSearchResults() {
  const resultNodes = [];
  const searchText = searchBar.value.trim().toLowerCase();

  if (!searchText) {
    dropdown.replaceChildren();
    searchContainer.style.backgroundColor = "var(--surface)";
    return;
  }

  for (const page of pageTrie.search(searchText)) {
    const result = document.createElement("a");
    result.innerText = nameToTitle(page);
    result.className = "search-result";
    result.href = "static/pages/" + page + ".html";
    resultNodes.push(result);
  }
  dropdown.replaceChildren(...resultNodes);
  searchContainer.style.backgroundColor =
    resultNodes.length > 0 ? "var(--surface3)" : "var(--surface)";
}

console.log("Building page index..");
for (const page of metaData.pages) {
  pageTrie.insert(page);
}
console.log("Done.");"""


def render_js(pages: List[str], category_to_pages: Dict[str, List[str]]) -> str:
    """Build bundle.js: trie, page metadata literal, search-bar controller."""
    return (
        JS_RADIX_TREE
        + "\n\nconst metaData = "
        + encode_metadata(pages, category_to_pages)
        + ";\n"
        + JS_SEARCH_BAR
        + "\n"
    )
