"""Tests for the HTML builder."""

import base64
import os
import unittest
from unittest.mock import Mock

from htmlbuilder.exceptions import (
    InvalidAttributeName,
    InvalidPreloadType,
    MimeTypeInferenceError,
)
from htmlbuilder.html import HtmlBuilder, add_classes, build_attrs, build_classes
from htmlbuilder.models import PreloadResource


class _Renderable:
    def __str__(self):
        return "value"


class BuildAttrsTest(unittest.TestCase):
    """Attribute merging and formatting."""

    def setUp(self):
        self.builder = HtmlBuilder()

    def test_build_attrs(self):
        cases = [
            ("Single", 'hello="world"', [{"hello": "world"}]),
            ("Multiple values", 'hello="world" foo="bar"', [{"hello": "world", "foo": "bar"}]),
            (
                "Multiple sets",
                'hello="overwritten" foo="bar"',
                [{"hello": "world", "foo": "bar"}, {"hello": "overwritten"}],
            ),
            (
                "Standard booleans",
                "hidden",
                [{"hidden": True, "disabled": False, "checked": None}],
            ),
            (
                "ARIA booleans",
                'aria-hidden="true" aria-disabled="false"',
                [{"aria-hidden": True, "aria-disabled": False}],
            ),
            (
                "Other data types",
                'data-int="1" data-float="1.234" data-bool="1" data-stringable="value"',
                [
                    {
                        "data-int": 1,
                        "data-float": 1.234,
                        "data-bool": True,
                        "data-stringable": _Renderable(),
                    }
                ],
            ),
            ("Bare names", "disabled inert", [["disabled", "inert"]]),
            ("Positional keys", "disabled inert", [{0: "disabled", 1: "inert"}]),
            ("Empty", "", []),
        ]
        for label, expected, attr_sets in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.build_attrs(*attr_sets))

    def test_merge_keeps_first_appearance_order(self):
        result = self.builder.build_attrs(
            {"id": "first", "title": "a"},
            {"role": "button"},
            {"id": "last"},
        )
        self.assertEqual('id="last" title="a" role="button"', result)

    def test_class_values_are_concatenated(self):
        result = self.builder.build_attrs(
            {"class": "  btn  "}, {"id": "x"}, {"class": "primary"}, {"class": "large"}
        )
        self.assertEqual('class="btn primary large" id="x"', result)

    def test_only_class_is_combined(self):
        result = self.builder.build_attrs({"style": "color:red"}, {"style": "margin:0"})
        self.assertEqual('style="margin:0"', result)

    def test_bare_names_mix_with_values(self):
        result = self.builder.build_attrs(["disabled"], {"disabled": False, "name": "q"})
        self.assertEqual('name="q"', result)

    def test_aria_attributes_never_omitted(self):
        result = self.builder.build_attrs(
            {"aria-label": "Close", "aria-busy": None, "aria-level": 2}
        )
        self.assertEqual('aria-label="Close" aria-busy="" aria-level="2"', result)

    def test_custom_attributes_keep_booleans(self):
        result = self.builder.build_attrs(
            {"data-open": True, "data-closed": False, "data-none": None}
        )
        self.assertEqual('data-open="1" data-closed="" data-none=""', result)

    def test_values_are_escaped(self):
        result = self.builder.build_attrs({"title": "<a href=\"x\">'&'</a>"})
        self.assertEqual(
            'title="&lt;a href=&quot;x&quot;&gt;&apos;&amp;&apos;&lt;/a&gt;"', result
        )

    def test_integral_float_renders_without_fraction(self):
        self.assertEqual('width="2"', self.builder.build_attrs({"width": 2.0}))

    def test_invalid_attribute_names(self):
        for char in [" ", "\t", "\n", "\x0c", "\r", "\x00", '"', "'", ">", "/", "=", "<"]:
            with self.subTest(char=repr(char)):
                with self.assertRaises(InvalidAttributeName) as ctx:
                    self.builder.build_attrs({"valid": "x"}, {f"bad{char}name": "x"})
                self.assertEqual(f"bad{char}name", ctx.exception.name)

    def test_invalid_bare_name(self):
        with self.assertRaises(InvalidAttributeName):
            self.builder.build_attrs(["ok", "not ok"])

    def test_invalid_name_is_a_value_error(self):
        with self.assertRaises(ValueError):
            self.builder.build_attrs({"a=b": 1})

    def test_module_level_function(self):
        self.assertEqual('type="text" required', build_attrs({"type": "text", "required": True}))


class ClassListTest(unittest.TestCase):
    """Class list helpers."""

    def setUp(self):
        self.builder = HtmlBuilder()

    def test_build_classes(self):
        cases = [
            ("Single", "hello-world", {"hello-world": True}),
            ("Multiple", "hello-world other-class", {"hello-world": True, "other-class": True}),
            ("Disabled", "hello-world", {"hello-world": True, "other-class": False}),
            ("None enabled", "", {"hello-world": False}),
            ("Escaped", "a&lt;b", {"a<b": True}),
        ]
        for label, expected, classes in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.build_classes(classes))
        self.assertEqual("x", build_classes({"x": True, "y": False}))

    def test_add_classes(self):
        cases = [
            ("Empty", "", "", []),
            ("No additions", "example-class", "example-class", []),
            ("Only additions", "additional-class", "", ["additional-class"]),
            (
                "Combined",
                "example-class additional-class",
                "example-class",
                ["additional-class"],
            ),
            ("Trimmed", "a b c", "  a  ", ["b", "c"]),
            ("Duplicates kept", "a a", "a", ["a"]),
        ]
        for label, expected, class_list, additional in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.add_classes(class_list, *additional))
                self.assertEqual(expected, add_classes(class_list, *additional))


class ResourceTagsTest(unittest.TestCase):
    """Stylesheet, script and preload tags."""

    def setUp(self):
        self.builder = HtmlBuilder()

    def test_build_stylesheet(self):
        self.assertEqual(
            '<link rel="stylesheet" href="stylesheet.css"/>',
            self.builder.build_stylesheet("stylesheet.css"),
        )
        self.assertEqual(
            '<link rel="stylesheet" href="stylesheet.css" media="example-media" '
            'integrity="example-hash" crossorigin="example-crossorigin"/>',
            self.builder.build_stylesheet(
                "stylesheet.css", "example-media", "example-hash", "example-crossorigin"
            ),
        )
        self.assertEqual(
            '<link rel="stylesheet" href="&lt;stylesheet.css&gt;" media="&lt;m&gt;"/>',
            self.builder.build_stylesheet("<stylesheet.css>", media="<m>"),
        )

    def test_build_script(self):
        self.assertEqual('<script src="script.js"></script>', self.builder.build_script("script.js"))
        self.assertEqual(
            '<script src="script.js" type="module" async integrity="example-hash" '
            'crossorigin="example-crossorigin"></script>',
            self.builder.build_script(
                "script.js",
                type_="module",
                async_=True,
                integrity="example-hash",
                crossorigin="example-crossorigin",
            ),
        )
        self.assertEqual(
            '<script src="&lt;script.js&gt;" type="&lt;module&gt;" async></script>',
            self.builder.build_script("<script.js>", type_="<module>", async_=True),
        )

    def test_build_preload_links(self):
        cases = [
            ("Empty", "", {}, []),
            (
                "Preloads only",
                '<link rel="preload" href="script.js" as="script"/>'
                '<link rel="preload" href="style.css" as="style"/>',
                {"script": "script.js", "style": ["style.css"]},
                [],
            ),
            (
                "Preconnects only",
                '<link rel="preconnect" href="example.com"/>'
                '<link rel="preconnect" href="example.org"/>',
                {},
                ["example.com", "example.org"],
            ),
            (
                "With attributes",
                '<link rel="preload" href="script.js" as="script" integrity="h1" crossorigin="c1"/>'
                '<link rel="preload" href="font.woff2" as="font" crossorigin="anonymous"/>'
                '<link rel="preconnect" href="example.com"/>',
                {
                    "script": [{"url": "script.js", "integrity": "h1", "crossorigin": "c1"}],
                    "font": PreloadResource(url="font.woff2", crossorigin="anonymous"),
                },
                ["example.com"],
            ),
            (
                "Safe values",
                '<link rel="preload" href="&lt;script.js&gt;" as="script"/>'
                '<link rel="preload" href="&lt;style.css&gt;" as="style" '
                'integrity="&lt;example-hash&gt;"/>'
                '<link rel="preconnect" href="&lt;example.com&gt;"/>',
                {
                    "script": "<script.js>",
                    "style": [{"url": "<style.css>", "integrity": "<example-hash>"}],
                },
                ["<example.com>"],
            ),
        ]
        for label, expected, preloads, hosts in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.build_preload_links(preloads, hosts))

    def test_build_preload_links_with_invalid_type(self):
        with self.assertRaises(InvalidPreloadType) as ctx:
            self.builder.build_preload_links({"unknown": []})
        self.assertEqual("unknown", ctx.exception.preload_type)

    def test_build_src_set(self):
        cases = [
            ("Empty", "", {}),
            ("Single", "image.jpg 1x", {"image.jpg": "1x"}),
            (
                "Densities",
                "image@3x.jpg 3x, image@2x.jpg 2x, image.jpg 1x",
                {"image@3x.jpg": "3x", "image@2x.jpg": "2x", "image.jpg": "1x"},
            ),
            ("Widths", "large.jpg 500w, small.jpg 200w", {"large.jpg": "500w", "small.jpg": "200w"}),
            (
                "Safe values",
                "&lt;large.jpg&gt; &lt;500px&gt;, &lt;small.jpg&gt; &lt;200px&gt;",
                {"<large.jpg>": "<500px>", "<small.jpg>": "<200px>"},
            ),
        ]
        for label, expected, entries in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.build_src_set(entries))


class WrapTextTest(unittest.TestCase):
    """Paragraph and word wrapping."""

    def setUp(self):
        self.builder = HtmlBuilder()

    def test_wrap_paragraphs(self):
        spaces = " " * 4
        cases = [
            ("Single paragraph", "<p>Hello world.</p>", "Hello world.", "<p>"),
            (
                "Multiple paragraphs",
                "<p>Hello world.</p><p>Another paragraph.</p>",
                "Hello world.\n\nAnother paragraph.",
                "<p>",
            ),
            ("Custom attributes", '<p class="test">Hello world.</p>', "Hello world.", '<p class="test">'),
            ("Tag name", "<div>Hello world.</div>", "Hello world.", "div"),
            (
                "Trimmed whitespace",
                "<p>Hello world.</p><p>Another paragraph.</p>",
                f"\n\nHello world.{spaces}\n\n\n\n     Another paragraph.{spaces}\n\n\n\n",
                "<p>",
            ),
            (
                "Single line breaks kept",
                "<p>Line one\nLine two</p>",
                "  Line one  \n  Line two",
                "<p>",
            ),
            ("Windows line breaks", "<p>a</p><p>b</p>", "a\r\n\r\nb", "<p>"),
            ("Safe values", '<p class="test">&lt;Hello world.&gt;</p>', "<Hello world.>", '<p class="test">'),
            ("Empty", "", "   ", "<p>"),
        ]
        for label, expected, text, tag in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.wrap_paragraphs(text, tag))

    def test_wrap_paragraphs_default_tag(self):
        self.assertEqual("<p>Hi</p>", self.builder.wrap_paragraphs("Hi"))

    def test_wrap_paragraphs_empty_tag_is_not_the_default(self):
        self.assertEqual("<>Hi</>", self.builder.wrap_paragraphs("Hi", ""))

    def test_wrap_words(self):
        cases = [
            ("Empty", "", "", "<span>"),
            (
                "Words",
                "<span>Hello</span> <span>world.</span> <span>This</span> <span>is</span> "
                "<span>a</span> <span>test.</span>",
                "Hello world. This is a test.",
                "<span>",
            ),
            (
                "Custom attributes",
                '<span class="test">Hello</span> <span class="test">world.</span>',
                "Hello world.",
                '<span class="test">',
            ),
            (
                "Preserved whitespace",
                "\n\n<span>Hello</span>     <span>world.</span>\n\n",
                "\n\nHello     world.\n\n",
                "<span>",
            ),
            ("Safe values", "<span>&lt;Hello</span> <span>world.&gt;</span>", "<Hello world.>", "<span>"),
        ]
        for label, expected, text, tag in cases:
            with self.subTest(label):
                self.assertEqual(expected, self.builder.wrap_words(text, tag))


class DataUriTest(unittest.TestCase):
    """Data URI generation."""

    def test_preset_types(self):
        builder = HtmlBuilder()
        encoded = base64.b64encode(b"Hello world.").decode("ascii")
        cases = [
            ("Preset text", "data:text/plain,Hello%20world.", "text/plain", None),
            ("Preset binary", f"data:unknown/test;base64,{encoded}", "unknown/test", None),
            (
                "Custom parameters",
                f"data:unknown/test;foo=bar;base64,{encoded}",
                "unknown/test",
                {"foo": "bar"},
            ),
            (
                "Encoded parameters",
                "data:text/plain;charset=utf-8;note=a%20b,Hello%20world.",
                "text/plain",
                {"charset": "utf-8", "note": "a b"},
            ),
        ]
        for label, expected, mime, params in cases:
            with self.subTest(label):
                self.assertEqual(expected, builder.generate_data_uri("Hello world.", mime, params))

    def test_bytes_input(self):
        builder = HtmlBuilder()
        self.assertEqual(
            "data:application/octet-stream;base64,AAEC",
            builder.generate_data_uri(b"\x00\x01\x02", "application/octet-stream"),
        )

    def test_inferred_type_uses_temporary_file(self):
        seen = {}

        def _guess(path):
            with open(path, "rb") as f:
                seen["data"] = f.read()
            seen["path"] = path
            return "foo/bar"

        guesser = Mock()
        guesser.guess_mime_type.side_effect = _guess
        builder = HtmlBuilder(mime_type_guesser=guesser)

        result = builder.generate_data_uri("Hello world.")

        expected = "data:foo/bar;base64," + base64.b64encode(b"Hello world.").decode("ascii")
        self.assertEqual(expected, result)
        guesser.guess_mime_type.assert_called_once()
        self.assertEqual(b"Hello world.", seen["data"])
        self.assertFalse(os.path.exists(seen["path"]), "The temporary file should be removed.")

    def test_inference_failure(self):
        guesser = Mock()
        guesser.guess_mime_type.return_value = None
        builder = HtmlBuilder(mime_type_guesser=guesser)
        with self.assertRaises(MimeTypeInferenceError):
            builder.generate_data_uri(b"\x00")

    def test_default_guesser(self):
        png = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8
        uri = HtmlBuilder().generate_data_uri(png)
        self.assertTrue(uri.startswith("data:image/png;base64,"))


class MapHtmlIdsTest(unittest.TestCase):
    """Regex-based ID rewriting."""

    def setUp(self):
        self.builder = HtmlBuilder()

    @staticmethod
    def _prefix(value, name):
        return f"new-{value}-value"

    def test_no_ids(self):
        transformer = Mock()
        html = "<p>Hello world.</p>"
        self.assertEqual(html, self.builder.map_html_ids(html, transformer))
        transformer.assert_not_called()

    def test_no_transformation(self):
        html = '<p id="test">Hello world.</p>'
        self.assertEqual(html, self.builder.map_html_ids(html, lambda v, n: v))

    def test_transformation(self):
        self.assertEqual(
            '<p id="new-test-value">Hello world.</p>',
            self.builder.map_html_ids('<p id="test">Hello world.</p>', self._prefix),
        )

    def test_transformer_receives_attribute_name(self):
        transformer = Mock(return_value="x")
        self.builder.map_html_ids('<label for="field">', transformer)
        transformer.assert_called_once_with("field", "for")

    def test_multiple_attributes(self):
        html = (
            '<div aria-labelledby="test-title" class="test-class">\n'
            '  <h1 id="test-title" hidden>Test title</h1>\n'
            "  <figure inert onclick=\"console.log('click');\" aria-describedby=\"test-caption\">\n"
            "    Test figure.\n"
            "  </figure>\n"
            '  <figcaption id=\'test-caption\'>Test caption.</figcaption>\n'
            '  <button data-target="test-title">Test button.</button>\n'
            "</div>"
        )
        expected = (
            '<div aria-labelledby="new-test-title-value" class="test-class">\n'
            '  <h1 id="new-test-title-value" hidden>Test title</h1>\n'
            "  <figure inert onclick=\"console.log('click');\" aria-describedby=\"new-test-caption-value\">\n"
            "    Test figure.\n"
            "  </figure>\n"
            '  <figcaption id=\'new-test-caption-value\'>Test caption.</figcaption>\n'
            '  <button data-target="test-title">Test button.</button>\n'
            "</div>"
        )
        self.assertEqual(expected, self.builder.map_html_ids(html, self._prefix))

    def test_additional_attributes(self):
        html = '<h1 id="t">T</h1><button data-target="t">B</button>'
        expected = '<h1 id="new-t-value">T</h1><button data-target="new-t-value">B</button>'
        self.assertEqual(
            expected, self.builder.map_html_ids(html, self._prefix, ["data-target"])
        )

    def test_values_are_escaped(self):
        self.assertEqual(
            '<p id="a&lt;b&gt;">',
            self.builder.map_html_ids('<p id="a">', lambda v, n: "a<b>"),
        )


if __name__ == "__main__":
    unittest.main()
