"""Test the package reference converter."""

import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from unpkgify import CdnSettings, Converter, OutputLabel, RuleName, convert


class TestConvertExamples:
    """The documented input/output pairs."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t \n "])
    def test_empty_input_gives_no_lines(self, text):
        result = convert(text)
        assert len(result) == 0
        assert not result
        assert result.text == ""

    def test_install_command_with_version(self):
        result = convert("npm install react@18.2.0")
        assert result.is_single
        assert result[0].label == OutputLabel.RESULT
        assert result[0].url == '<script src="https://unpkg.com/react@18.2.0"></script>'

    def test_install_command_defaults_to_latest(self):
        result = convert("npm install lodash")
        assert result.urls() == ['<script src="https://unpkg.com/lodash@latest"></script>']

    def test_import_statement(self):
        result = convert('import React from "react"')
        assert result.is_single
        assert result[0].label == OutputLabel.RESULT
        assert result[0].url == "https://unpkg.com/react@latest"

    def test_require_call(self):
        result = convert('require("lodash")')
        assert result.urls() == ["https://unpkg.com/lodash@latest"]
        assert result[0].label == OutputLabel.RESULT

    def test_registry_url(self):
        result = convert("https://www.npmjs.com/package/axios")
        assert len(result) == 2
        assert result[0].label == OutputLabel.CDN_LINK
        assert result[0].url == "https://unpkg.com/axios@latest/<file-path>"
        assert result[1].label == OutputLabel.BROWSE_PACKAGE
        assert result[1].url == "https://unpkg.com/axios@latest/"

    def test_scoped_bare_specifier_with_version(self):
        result = convert("@types/node@20.0.0")
        assert result.is_single
        assert result[0].label == OutputLabel.RESULT
        assert result[0].url == "https://unpkg.com/@types/node@20.0.0"


class TestIdempotence:
    """Converted output is left alone on a second pass."""

    @pytest.mark.parametrize(
        "text",
        [
            "npm install react@18.2.0",
            "npm install lodash",
            'import React from "react"',
            'require("lodash")',
            "https://www.npmjs.com/package/axios",
            "https://www.npmjs.com/package/@hybridxweb/copyright-x",
            "@types/node@20.0.0",
        ],
    )
    def test_second_pass_is_stable(self, text):
        first = convert(text)
        second = convert(first.text)
        assert second.lines == first.lines

    def test_unpkg_url_is_not_rewritten(self):
        result = convert("https://unpkg.com/react@latest")
        assert result.urls() == ["https://unpkg.com/react@latest"]


class TestPassThrough:
    """Unrecognised text survives as Result lines."""

    def test_prose_passes_through_unchanged(self):
        result = convert("Hello world, nothing to see here")
        assert result.urls() == ["Hello world, nothing to see here"]
        assert result[0].label == OutputLabel.RESULT

    def test_single_word_line_is_treated_as_package(self):
        result = convert("Hello")
        assert result.urls() == ["https://unpkg.com/Hello@latest"]

    def test_blank_lines_are_dropped(self):
        result = convert("react\n\n   \nvue@3.4.0\n")
        assert result.urls() == [
            "https://unpkg.com/react@latest",
            "https://unpkg.com/vue@3.4.0",
        ]

    def test_lone_carriage_return_ends_a_line(self):
        result = convert("react\rvue")
        assert result.urls() == [
            "https://unpkg.com/react@latest",
            "https://unpkg.com/vue@latest",
        ]

    def test_windows_line_endings(self):
        result = convert("react\r\nvue")
        assert result.urls() == [
            "https://unpkg.com/react@latest",
            "https://unpkg.com/vue@latest",
        ]


class TestOrderingAndPrecedence:
    """Rules run in priority order over shared text."""

    def test_lines_keep_input_order(self):
        text = "\n".join([
            "npm install react",
            "require('lodash')",
            "https://npmjs.com/package/axios",
            "preact@10.19.0",
        ])
        result = convert(text)
        assert [line.label for line in result] == [
            OutputLabel.RESULT,
            OutputLabel.RESULT,
            OutputLabel.CDN_LINK,
            OutputLabel.BROWSE_PACKAGE,
            OutputLabel.RESULT,
        ]
        assert result.urls() == [
            '<script src="https://unpkg.com/react@latest"></script>',
            "https://unpkg.com/lodash@latest",
            "https://unpkg.com/axios@latest/<file-path>",
            "https://unpkg.com/axios@latest/",
            "https://unpkg.com/preact@10.19.0",
        ]

    def test_later_rules_see_earlier_output(self):
        result = convert("import a from 'alpha'; const b = require('beta')")
        assert result.urls() == [
            "https://unpkg.com/alpha@latest; const b = https://unpkg.com/beta@latest"
        ]

    def test_every_match_on_a_line_is_replaced(self):
        result = convert("import a from 'x'; import b from \"y@2.0.0\"")
        assert result.urls() == ["https://unpkg.com/x@latest; https://unpkg.com/y@2.0.0"]

    def test_install_rule_wins_over_bare_specifier(self):
        # "npm install vue" would never be a bare specifier; the install
        # rule consumes it first and the tag is not touched afterwards.
        result = convert("npm install vue@3")
        assert result.urls() == ['<script src="https://unpkg.com/vue@3"></script>']


class TestScopedNames:
    """Scoped names keep their leading "@" and inner "/" in every rule."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("npm install @babel/core@7.24.0", '<script src="https://unpkg.com/@babel/core@7.24.0"></script>'),
            ("import { h } from '@vue/runtime-dom'", "https://unpkg.com/@vue/runtime-dom@latest"),
            ("require('@scope/pkg@1.0.0')", "https://unpkg.com/@scope/pkg@1.0.0"),
            ("@angular/core", "https://unpkg.com/@angular/core@latest"),
        ],
    )
    def test_scoped_names(self, text, expected):
        assert convert(text).urls() == [expected]

    def test_scoped_registry_url(self):
        result = convert("https://www.npmjs.com/package/@hybridxweb/copyright-x")
        assert result.urls() == [
            "https://unpkg.com/@hybridxweb/copyright-x@latest/<file-path>",
            "https://unpkg.com/@hybridxweb/copyright-x@latest/",
        ]


class TestConverterSettings:
    """Converter honours its CDN settings."""

    def test_custom_base_url_and_default_version(self):
        converter = Converter(CdnSettings(base_url="https://cdn.jsdelivr.net/npm/", default_version="next"))
        assert converter.convert("react").urls() == ["https://cdn.jsdelivr.net/npm/react@next"]

    def test_disabled_rule_leaves_text_alone(self):
        converter = Converter(CdnSettings(enabled_rules=(RuleName.BARE_SPECIFIER,)))
        assert converter.convert('require("lodash")').urls() == ['require("lodash")']

    def test_rules_always_run_in_priority_order(self):
        converter = Converter(CdnSettings(enabled_rules=tuple(reversed(list(RuleName)))))
        assert [rule.name for rule in converter.rules] == list(RuleName)

    def test_custom_placeholder(self):
        converter = Converter(CdnSettings(file_path_placeholder="index.js"))
        result = converter.convert("https://npmjs.com/package/axios")
        assert result[0].url == "https://unpkg.com/axios@latest/index.js"

    def test_empty_registry_enables_no_rules(self):
        converter = Converter(rule_registry={})
        assert converter.rules == []
        assert converter.convert("react").urls() == ["react"]

    def test_label_line_strips_prefix(self):
        line = Converter.label_line("Browse:   https://unpkg.com/a@latest/")
        assert line.label == OutputLabel.BROWSE_PACKAGE
        assert line.url == "https://unpkg.com/a@latest/"


def test_debug_logging_reports_rule_matches(caplog):
    caplog.set_level(logging.DEBUG, logger="unpkgify.converter")
    Converter().convert("react\nvue")
    assert "bare_specifier rewrote 2 reference(s)" in caplog.text
    assert "Conversion produced 2 line(s)" in caplog.text
