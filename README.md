# htmldom

A small HTML parser with no dependencies. It turns markup into a tree of nodes
that you can walk, search, query with simple CSS-style selectors and write back
out as HTML.

## Installation

From a checkout of the project:

```
pip install .
```

## Parsing

```python
from htmldom.parser import Parser, parse

dom = parse("<html><body><p>Hello World</p></body></html>")
paragraph = dom.get_elements_by_tag_name("p")[0]
print(paragraph.text_content())   # Hello World
```

Fragments work as well. The parser adds any missing `html`, `head` and `body`
elements and skips whitespace that comes before the body. Tag names are
lower-cased. Attribute names are kept exactly as written.

```python
dom = parse('<div id="main">Main Content</div>')
element = dom.get_element_by_id("main")
print(element.tag)                 # div
```

### Strict mode

By default the parser ignores an end tag that has no matching open element. In
strict mode such an end tag raises `ParseError`, which is a subclass of
`RuntimeError`:

```python
from htmldom.parser import ParseError, parse

try:
    parse("<div><p>Unclosed paragraph</div></p>", strict=True)
except ParseError as error:
    print(error)   # Parse error: No matching start tag for end tag: p
```

You can also create a reusable parser with `Parser(strict=True)` and then call
`parser.parse(text)`. Every call to `parse` builds a new document.

## The document

`parse` returns a `DOM` from `htmldom.dom`. Its `root` attribute is a node of
type `NodeType.DOCUMENT`. A `DOM` has these methods:

- `traverse()` yields every node in document order, starting with the root.
- `get_elements_by_tag_name(tag_name)` returns the matching elements. The tag comparison ignores ASCII case.
- `get_elements_by_class_name(class_name)` returns the matching elements.
- `get_element_by_id(element_id)` returns the first element whose `id` equals `element_id`, or `None`.
- `to_html()` serialises the children of the root. It escapes `& < > " '` in text and attribute values. Elements listed in `htmldom.dom.VOID_ELEMENTS`, such as `br` and `img`, are written without children and without a closing tag.

```python
from htmldom.node import NodeType

tags = [node.tag for node in dom.traverse() if node.type is NodeType.ELEMENT]
```

A `Node` from `htmldom.node` has the fields `type`, `tag`, `text`, `attributes`,
`children` and `parent`. It also has these methods:

- `append_child(child)`
- `get_attribute(name)`, which returns `""` when the attribute is absent
- `has_class(class_name)`
- `text_content()`, which returns all descendant text joined in order

To change an attribute, assign into `node.attributes`. Nodes compare equal only
to themselves.

## Selectors

```python
from htmldom.query import Query

query = Query(dom.root)
intro = query.select("p.intro")
first = query.select_first("#title")
inputs = query.select('input[type="text"]')
```

You can combine a tag name, `.class`, `#id`, `[attr]` and `[attr=value]` in one
compound selector. Quotes around the value are optional. Whitespace between
compound selectors matches descendants.

`select` returns every match in document order. `select_first` returns the
first match or `None`.

## Lower-level pieces

`htmldom.tokenizer.tokenize(text)` returns the raw token list, as does
`Tokenizer(text).tokenize()`. The list holds start tags, end tags and one
`CHARACTER` token for each text character.

`htmldom.utils` provides:

- `to_lower`, which lower-cases ASCII letters only
- `trim`, which strips space, tab, newline, carriage return and form feed
- `escape_html`

## What it does not do

This is a deliberately small parser. It is not a full HTML5 implementation.

- Comments, `<!DOCTYPE ...>` and other `<!` constructs are not recognised. They end up as plain text.
- Character references such as `&amp;` are not decoded.
- `script` and `style` contents are not treated as raw text.
- Each text character becomes its own text node. `text_content()` joins them back together.
- Void elements are only closed when they are written self-closing, as in `<br/>`. A bare `<br>` stays open, so the content that follows it becomes its children. `to_html()` then leaves those children out.
- A tag still unfinished at the end of the input is dropped.
- The `>`, `+` and `~` combinators and pseudo-classes are not supported in selectors. Whitespace inside a quoted attribute value splits the selector.
- There is no command-line program. The package is a library only.