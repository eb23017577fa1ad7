APP_ORG = "QuickTools"
APP_NAME = "Markdown to HTML Converter"

# Utility classes used by the style registry, so the preview looks right without Tailwind.
CSS_PREVIEW = r"""
html,body { background:#ffffff; color:#111; }
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1rem; line-height: 1.5; }
.text-4xl { font-size:2.25rem; } .text-3xl { font-size:1.875rem; } .text-2xl { font-size:1.5rem; }
.text-xl { font-size:1.25rem; } .text-lg { font-size:1.125rem; } .text-base { font-size:1rem; }
.font-bold { font-weight:700; } .italic { font-style:italic; }
.mb-1 { margin-bottom:.25rem; } .mb-2 { margin-bottom:.5rem; } .mb-3 { margin-bottom:.75rem; } .mb-4 { margin-bottom:1rem; }
.list-disc { list-style-type:disc; } .list-decimal { list-style-type:decimal; } .list-inside { list-style-position:inside; }
.text-blue-500 { color:#3b82f6; text-decoration:none; } .hover\:underline:hover { text-decoration:underline; }
.border-l-4 { border-left:4px solid; } .border-gray-300 { border-color:#d1d5db; } .pl-4 { padding-left:1rem; }
.bg-gray-100 { background:#f3f4f6; } .rounded { border-radius:.25rem; } .px-1 { padding-left:.25rem; padding-right:.25rem; }
.p-4 { padding:1rem; }
pre { overflow:auto; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0"/>
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

DEMO_MARKDOWN = """# Sample Markdown
This is a basic example of Markdown.
## Second Heading
 * Unordered list:
   - Item 1
   - Item 2
   - Item 3
 * More items
> This is a blockquote.
**Bold text**, *italic text*, and combined **bold and *italic*** text. ~~Strikethrough~~ text. [Link to example](https://example.com).
### Code Example:
```js
var foo = 'bar';
function baz(s) {
   return foo + ':' + s;
}
```
Inline code: `var foo = 'bar';`.
The end."""

SETTINGS_GEOMETRY = "window/geometry"
SETTINGS_SPLITTER = "window/splitter"
SETTINGS_ACTIVE_VIEW = "view/active"
DEFAULT_DEBOUNCE_MS = 150
