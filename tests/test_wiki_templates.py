# tests/test_wiki_templates.py
import json
import shutil
import subprocess

import pytest

import wiki_templates
from build_wiki import WikiConfig
from radix_tree import RadixTree


def test_layout_escapes_title():
    page = wiki_templates.render_layout("A <b> page", "styles.css", "index.html", "<p>x</p>")
    assert "<title>A &lt;b&gt; page</title>" in page
    assert '<link rel="stylesheet" href="styles.css">' in page
    assert '<a href="index.html">Home</a>' in page
    assert "<p>x</p>" in page


def test_index_body_has_search_bar():
    body = wiki_templates.render_index_body("My Wiki")
    assert "<h1>My Wiki</h1>" in body
    assert 'id="search-bar"' in body
    assert 'onkeyup="updateSearchResults();"' in body
    assert 'id="dropdown"' in body
    assert '<script src="bundle.js"></script>' in body


def test_css_uses_theme_colors():
    theme = dict(WikiConfig.DEFAULTS, **{"theme-primary": "#123456"})
    css = wiki_templates.render_css(theme)
    assert "--primary: #123456;" in css
    assert "--surface: #242424;" in css


def test_encode_metadata():
    text = wiki_templates.encode_metadata(["a", "b"], {"Misc": ["b"]})
    assert json.loads(text) == {"pages": ["a", "b"], "categoryToPages": {"Misc": ["b"]}}


def test_encode_metadata_cannot_close_script_tag():
    text = wiki_templates.encode_metadata(["x"], {"</script><script>": ["x"]})
    assert "</script>" not in text
    assert json.loads(text)["categoryToPages"] == {"</script><script>": ["x"]}


def test_render_js_embeds_pages_before_controller():
    bundle = wiki_templates.render_js(["andrew", "al"], {})
    assert "class RadixTree" in bundle
    assert 'const metaData = {"pages": ["andrew", "al"], "categoryToPages": {}};' in bundle
    assert bundle.index("const metaData") < bundle.index("for (const page of metaData.pages)")
    assert '"static/pages/" + page + ".html"' in bundle


SCENARIOS = [
    (["andrew", "andrea", "al"], ["an", "al", "z", "ndr", "", "a"]),
    (["cat", "car", "dog"], ["cat", "car", "ca", "dog", "o"]),
    (["cab", "abxyz", "cab", "and", "andrew"], ["ab", "xy", "and", "b"]),
    ([], ["a"]),
]


@pytest.mark.skipif(shutil.which("node") is None, reason="node is not installed")
def test_bundle_tree_matches_python_tree(tmp_path):
    script = tmp_path / "parity.js"
    script.write_text(
        wiki_templates.JS_RADIX_TREE
        + "\n\nconst scenarios = " + json.dumps(SCENARIOS) + ";\n"
        + """const out = scenarios.map(([words, queries]) => {
  const tree = new RadixTree();
  for (const word of words) tree.insert(word);
  return queries.map((query) => tree.search(query));
});
console.log(JSON.stringify(out));
""",
        encoding="utf-8",
    )
    proc = subprocess.run(["node", str(script)], capture_output=True, text=True, check=True)

    expected = []
    for words, queries in SCENARIOS:
        tree = RadixTree(words)
        expected.append([tree.search(query) for query in queries])
    assert json.loads(proc.stdout) == expected
    assert expected[0][0] == ["andrea", "andrew"]
