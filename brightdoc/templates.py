"""
templates.py - Fixed HTML fragments emitted for the Brightspace D2L theme
"""

D2L_FONTS_CSS = "https://s.brightspace.com/lib/fonts/0.6.1/fonts.css"
D2L_TEMPLATE_CSS = "https://templates.lcs.brightspace.com/lib/assets/css/styles.min.css"

# {lang} is the code block's first class, {code} the trimmed, normalized text.
# The newline before </code> keeps the last line visible to the
# line-numbers plugin.
CODE_BLOCK_TEMPLATE = (
    '<pre class="line-numbers d2l-code"><code class="language-{lang}">'
    "{code}\n"
    "</code></pre>"
)

EMBEDDED_CSS = """\
/* Table styling */
table {
  border-collapse: collapse;
  width: 100%;
  margin: 1em 0;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
  box-shadow: 0 2px 8px rgba(0,0,0,0.1);
  border-radius: 8px;
  overflow: hidden;
}
table th, table td {
  border: 1px solid #e8e9ea;
  padding: 12px 16px;
  text-align: left;
}
table th {
  background: #764ba2;
  font-weight: 600;
  color: #ffffff;
  text-transform: uppercase;
  letter-spacing: 0.5px;
  font-size: 0.9em;
}
table tr:nth-child(even) {
  background-color: #f8f9ff;
}
table tr:nth-child(odd) {
  background-color: #ffffff;
}
table tr:hover {
  background: linear-gradient(90deg, #e8f4f8 0%, #d1ecf1 100%);
  transform: scale(1.01);
  transition: all 0.2s ease;
  box-shadow: 0 2px 4px rgba(0,0,0,0.1);
}

/* Blockquote styling */
blockquote {
  background-color: #fef9e7;
  border-left: 4px solid #007bff;
  margin: 1.5em 0;
  padding: 1em 1.5em;
  font-style: italic;
  color: #5d4e37;
  border-radius: 0 4px 4px 0;
  box-shadow: 0 2px 4px rgba(0,0,0,0.05);
}
blockquote p {
  margin: 0.5em 0;
}
blockquote p:first-child {
  margin-top: 0;
}
blockquote p:last-child {
  margin-bottom: 0;
}

/* Heading styles */
h1 {
  color: #2c3e50;
  font-weight: 700;
  margin-top: 2em;
  margin-bottom: 1em;
  padding-bottom: 0.3em;
  margin-block: 12px 0px !important;
}
h2 {
  color: #34495e;
  font-weight: 600;
  margin-top: 1.8em;
  margin-bottom: 0.8em;
  padding-bottom: 0.2em;
  border-bottom: 1px solid #bdc3c7;
}
h3 {
  color: #34495e;
  font-weight: 600;
  margin-top: 1.5em;
  margin-bottom: 0.75em;
}
h4 {
  color: #34495e;
  font-weight: 600;
  margin-top: 1.3em;
  margin-bottom: 0.7em;
}
h5 {
  color: #7f8c8d;
  font-weight: 500;
  margin-top: 1.2em;
  margin-bottom: 0.6em;
  font-size: 1.1em;
}
h6 {
  color: #95a5a6;
  font-weight: 500;
  margin-top: 1.1em;
  margin-bottom: 0.5em;
  font-size: 1em;
  letter-spacing: 0.5px;
}

/* Inline code */
code {
  color: #000000 !important;
  padding: 0.2em 0.4em;
  border-radius: 3px;
  font-family: 'SFMono-Regular', Consolas, 'Liberation Mono', Menlo, monospace;
  font-size: 0.9em;
}

/* Brightspace colors inline code; win on specificity */
body code {
  color: #000000 !important;
}

html body ul li ul li code,
html body ul li code,
body ul li ul li code,
body ol li ul li code,
body ul li ol li code,
body ol li ol li code,
html body:not(.template-fallback) ul li ul li code,
html body:not(.template-fallback) ol li ul li code,
html body:not(.template-fallback) ul li ol li code,
html body:not(.template-fallback) ol li ol li code,
html body div ul li ul li code,
html body div ol li ul li code,
html body div ul li ol li code,
html body div ol li ol li code {
  color: #000000 !important;
  background-color: transparent !important;
}

/* Reset every color-affecting property on code in lists */
html body ul li code,
html body ol li code,
html body ul li ul li code,
html body ul li ol li code,
html body ol li ul li code,
html body ol li ol li code {
  color: #000000 !important;
  background-color: transparent !important;
  text-decoration: none !important;
  text-shadow: none !important;
  border: none !important;
  box-shadow: none !important;
  outline: none !important;
  filter: none !important;
  opacity: 1 !important;
}

/* Code inside pre blocks keeps the highlighter's styling */
pre code {
  background-color: transparent;
  color: inherit;
  padding: 0;
  border-radius: 0;
  border: none;
}

/* Extra spacing after code blocks */
pre {
  margin-bottom: 2em !important;
}

/* Extra spacing before headings H2-H6 */
h2, h3, h4, h5, h6 {
  margin-top: 2em !important;
}
"""

BODY_STYLE = "color: rgb(32, 33, 34); font-family: 'Lato', sans-serif; font-size: 12px;"

HTML_HEADER = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    f'<link rel="stylesheet" href="{D2L_FONTS_CSS}">\n'
    f'<link rel="stylesheet" href="{D2L_TEMPLATE_CSS}">\n'
    "<style>\n"
    f"{EMBEDDED_CSS}"
    "</style>\n"
    "</head>\n"
    f'<body style="{BODY_STYLE}">'
)

HTML_FOOTER = "</body>\n</html>"
