from spring_mdx.rewriter import (
    camel_case,
    close_void_tags,
    convert_style_to_jsx,
    css_to_jsx_object,
    escape_angle_brackets,
    escape_curly_braces,
    fix_mdx_line,
    process_body,
    remove_html_comments,
)


class TestCloseVoidTags:
    def test_img_with_attributes(self):
        assert close_void_tags('<img src="a.png" alt="x">') == '<img src="a.png" alt="x" />'

    def test_source_tag(self):
        line = '<source src="v.mp4" type="video/mp4">'
        assert close_void_tags(line) == '<source src="v.mp4" type="video/mp4" />'

    def test_br_and_hr(self):
        assert close_void_tags("one<br>two<br >three") == "one<br />two<br />three"
        assert close_void_tags("<hr>") == "<hr />"

    def test_already_closed_unchanged(self):
        assert close_void_tags('<img src="a.png" />') == '<img src="a.png" />'
        assert close_void_tags("<br/>") == "<br/>"


class TestRemoveHtmlComments:
    def test_inline_comment(self):
        assert remove_html_comments("before <!-- note --> after") == "before  after"

    def test_whole_line_comment(self):
        assert remove_html_comments("<!-- note -->") == ""

    def test_stray_close_marker(self):
        assert remove_html_comments("end of comment -->  ") == "end of comment"

    def test_unterminated_open_marker(self):
        assert remove_html_comments("keep <!-- start of comment") == "keep "


class TestStyleToJsx:
    def test_converts_declarations(self):
        line = '<div style="font-size: 12px; text-align: center;">'
        assert convert_style_to_jsx(line) == '<div style={{fontSize: "12px", textAlign: "center"}}>'

    def test_skips_invalid_declarations(self):
        assert css_to_jsx_object("color: red; bogus; ;") == '{color: "red"}'

    def test_value_with_colon(self):
        assert css_to_jsx_object("background: url(https://x/y.png)") == '{background: "url(https://x/y.png)"}'

    def test_no_style_unchanged(self):
        assert convert_style_to_jsx('<div class="x">') == '<div class="x">'

    def test_camel_case(self):
        assert camel_case("border-top-left-radius") == "borderTopLeftRadius"
        assert camel_case("color") == "color"


class TestEscapeCurlyBraces:
    def test_escapes_outside_code_spans(self):
        assert escape_curly_braces("Use {name} and `{code}`") == "Use \\{name\\} and `{code}`"

    def test_already_escaped_untouched(self):
        assert escape_curly_braces("a \\{b\\}") == "a \\{b\\}"

    def test_unknown_leading_tag_not_exempt(self):
        assert escape_curly_braces("<Note>{x}</Note>") == "<Note>\\{x\\}</Note>"

    def test_self_contained_tag_line_untouched(self):
        line = '  <div style={{color: "red"}}>  '
        assert escape_curly_braces(line) == line

    def test_escaped_count_matches_original(self):
        line = "a {b} `{c}` {d"
        result = escape_curly_braces(line)
        assert result == "a \\{b\\} `{c}` \\{d"
        assert result.count("\\{") == 2


class TestEscapeAngleBrackets:
    def test_generic_type_wrapped_in_code(self):
        assert escape_angle_brackets("Use List<String> for results") == "Use List`<String>` for results"

    def test_lone_bracket_becomes_entity(self):
        assert escape_angle_brackets("a < b") == "a &lt; b"

    def test_far_closing_bracket_not_used(self):
        line = "x < " + "y" * 70 + ">"
        assert escape_angle_brackets(line) == "x &lt; " + "y" * 70 + ">"

    def test_known_tags_kept(self):
        line = '<div class="x">text <b>bold</b></div>'
        assert escape_angle_brackets(line) == line

    def test_autolinks_kept(self):
        line = "See <https://spring.io> or <mailto:team@spring.io>"
        assert escape_angle_brackets(line) == line

    def test_link_target_kept(self):
        line = "[docs](<Some Page>)"
        assert escape_angle_brackets(line) == line

    def test_inside_code_span_kept(self):
        line = "Declare `Map<K, V>` first"
        assert escape_angle_brackets(line) == line


class TestFixMdxLine:
    def test_comment_removed_entirely(self):
        result = fix_mdx_line("<!-- note -->")
        assert "<!--" not in result
        assert "-->" not in result

    def test_styled_paragraph(self):
        line = '<p style="text-align: center">Figure</p>'
        assert fix_mdx_line(line) == '<p style={{textAlign: "center"}}>Figure</p>'

    def test_prose_with_braces_and_generics(self):
        line = "Return Map<String, Object> from {handler}"
        assert fix_mdx_line(line) == "Return Map`<String, Object>` from \\{handler\\}"


class TestProcessBody:
    def test_code_fence_passthrough(self):
        lines = [
            "```java",
            "Map<String, Object> m = new HashMap<>(); // {x} <!-- c -->",
            "  <br>",
            "```",
            "after {y}",
        ]
        result = process_body(lines)
        assert result[:4] == lines[:4]
        assert result[4] == "after \\{y\\}"

    def test_indented_fence_toggles(self):
        lines = ["  ```", "{raw}", "  ```", "{prose}"]
        assert process_body(lines) == ["  ```", "{raw}", "  ```", "\\{prose\\}"]

    def test_unclosed_fence_keeps_rest_verbatim(self):
        lines = ["text {a}", "```", "{b}", "<T>"]
        assert process_body(lines) == ["text \\{a\\}", "```", "{b}", "<T>"]
