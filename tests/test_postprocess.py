# tests/test_postprocess.py
"""
Tests for postprocess.py - HTML clean-up after pandoc
"""
from brightdoc.postprocess import add_link_targets, postprocess_html, unescape_entities


class TestUnescapeEntities:

    def test_common_entities(self):
        html = "&quot;a&quot; &apos;b&apos; &lt;c&gt; &amp;"
        assert unescape_entities(html) == "\"a\" 'b' <c> &"

    def test_amp_before_lt(self):
        """&amp; is undone first, so a double-escaped entity collapses fully"""
        assert unescape_entities("&amp;lt;") == "<"

    def test_other_entities_untouched(self):
        assert unescape_entities("&nbsp;&copy;&#39;") == "&nbsp;&copy;&#39;"

    def test_none(self):
        assert unescape_entities(None) == ""


class TestAddLinkTargets:

    def test_adds_target(self):
        html = '<p><a href="https://d2l.com">D2L</a></p>'
        assert add_link_targets(html) == '<p><a href="https://d2l.com" target="_blank">D2L</a></p>'

    def test_existing_target_kept(self):
        html = '<a href="#top" target="_self">top</a>'
        assert add_link_targets(html) == html

    def test_bare_anchor(self):
        assert add_link_targets("<a>x</a>") == '<a target="_blank">x</a>'

    def test_self_closing(self):
        assert add_link_targets('<a id="x"/>') == '<a id="x" target="_blank"/>'

    def test_other_tags_untouched(self):
        html = '<abbr title="t">T</abbr><aside>s</aside><area href="x">'
        assert add_link_targets(html) == html

    def test_every_anchor(self):
        html = '<a href="1">1</a> <A HREF="2">2</A>'
        result = add_link_targets(html)
        assert result.count('target="_blank"') == 2

    def test_less_than_before_a_is_not_a_tag(self):
        html = "<p><code>i &lt;a.length</code> and <code>x &gt; 0</code></p>"
        assert postprocess_html(html) == "<p><code>i <a.length</code> and <code>x > 0</code></p>"

    def test_gt_inside_quoted_attribute(self):
        html = '<a href="x" title="a>b">x</a>'
        assert add_link_targets(html) == '<a href="x" title="a>b" target="_blank">x</a>'

    def test_single_quoted_attribute(self):
        html = "<a href='x' title='1 > 0'>x</a>"
        assert add_link_targets(html) == "<a href='x' title='1 > 0' target=\"_blank\">x</a>"


class TestPostprocessHtml:

    def test_both_steps(self):
        html = '<a href="x">&quot;q&quot;</a>'
        assert postprocess_html(html) == '<a href="x" target="_blank">"q"</a>'

    def test_steps_can_be_disabled(self):
        html = '<a href="x">&quot;q&quot;</a>'
        assert postprocess_html(html, unescape=False, new_tab_links=False) == html
        assert postprocess_html(html, unescape=False) == '<a href="x" target="_blank">&quot;q&quot;</a>'
