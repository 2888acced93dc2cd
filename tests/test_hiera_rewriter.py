#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Hiera config rewriting: datadir reset, hierarchy prefixing, override
injection and verbatim passthrough of everything else.
"""
from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

import yaml

from tools.fixtures import HIERA_YAML, write

from hoirun.errors import InputError
from hoirun.hiera.document import (
    DataDirLine,
    HieraDocument,
    HierarchyHeader,
    ListEntry,
    RawLine,
    quote_scalar,
    split_comment,
    unquote_scalar,
)
from hoirun.hiera.rewriter import HieraRewriter

DATA_DIR = Path("/srv/hoienv/hieradata")
PREFIX = "srv/hoienv/hieradata"


def _hierarchy(text: str) -> list:
    return yaml.safe_load(text)[":hierarchy"]


class HieraDocumentTests(unittest.TestCase):
    def test_render_is_byte_identical(self) -> None:
        src = HIERA_YAML + "\n# trailing comment\r\n  - dangling\n"
        self.assertEqual(HieraDocument.parse(src).render(), src)

    def test_classification(self) -> None:
        doc = HieraDocument.parse(HIERA_YAML)
        kinds = [type(ln) for ln in doc]
        self.assertEqual(kinds[0], RawLine)           # ---
        self.assertEqual(kinds[2], ListEntry)         # - yaml
        self.assertEqual(kinds[4], DataDirLine)
        self.assertEqual(kinds[5], HierarchyHeader)
        self.assertEqual(len(doc.entries()), 4)

    def test_document_marker_is_not_an_entry(self) -> None:
        self.assertIsInstance(HieraDocument.parse("---\n").lines[0], RawLine)

    def test_scalar_quoting(self) -> None:
        self.assertEqual(unquote_scalar('"nodes/%{::fqdn}"'), "nodes/%{::fqdn}")
        self.assertEqual(unquote_scalar("'it''s'"), "it's")
        self.assertEqual(unquote_scalar("common"), "common")
        self.assertEqual(quote_scalar('a"b\\c'), '"a\\"b\\\\c"')

    def test_yaml_escapes_are_decoded(self) -> None:
        self.assertEqual(unquote_scalar('"a\\tb"'), "a\tb")
        self.assertEqual(unquote_scalar('"caf\\u00e9"'), "café")
        self.assertEqual(yaml.safe_load(quote_scalar("a\tb")), "a\tb")

    def test_malformed_quoted_entry_is_input_error(self) -> None:
        with self.assertRaises(InputError):
            unquote_scalar('"unterminated')

    def test_trailing_comment_is_split_off(self) -> None:
        self.assertEqual(split_comment('"nodes/%{::fqdn}"  # per node'), ('"nodes/%{::fqdn}"', "  # per node"))
        self.assertEqual(split_comment("common # base"), ("common", " # base"))
        self.assertEqual(split_comment("'a # b'"), ("'a # b'", ""))
        self.assertEqual(split_comment("a#b"), ("a#b", ""))
        self.assertEqual(split_comment('"a\\" # b"'), ('"a\\" # b"', ""))

    def test_entry_with_comment_renders_verbatim(self) -> None:
        src = ':hierarchy:\n  - "nodes/%{::fqdn}"  # per node\n'
        doc = HieraDocument.parse(src)
        self.assertEqual(doc.render(), src)
        self.assertEqual(doc.entries()[0].scalar, "nodes/%{::fqdn}")


class HieraRewriterTextTests(unittest.TestCase):
    def setUp(self) -> None:
        self.rw = HieraRewriter()

    def test_prefixes_every_entry_without_override(self) -> None:
        out = self.rw.rewrite_text(HIERA_YAML, DATA_DIR)
        self.assertEqual(
            _hierarchy(out),
            [f"{PREFIX}/nodes/%{{::fqdn}}", f"{PREFIX}/roles/%{{::role}}", f"{PREFIX}/common"],
        )

    def test_datadir_is_root(self) -> None:
        out = self.rw.rewrite_text(HIERA_YAML, DATA_DIR)
        self.assertIn("  :datadir: /\n", out)
        self.assertNotIn("/etc/puppet/hieradata", out)
        self.assertEqual(yaml.safe_load(out)[":yaml"][":datadir"], "/")

    def test_override_is_first_entry(self) -> None:
        out = self.rw.rewrite_text(HIERA_YAML, DATA_DIR, Path("/home/dev/local.yaml"))
        entries = _hierarchy(out)
        self.assertEqual(len(entries), 4)
        self.assertEqual(entries[0], "home/dev/local")
        self.assertEqual(entries[1:], _hierarchy(self.rw.rewrite_text(HIERA_YAML, DATA_DIR)))

    def test_exact_output(self) -> None:
        out = self.rw.rewrite_text(HIERA_YAML, DATA_DIR, Path("/tmp/o.yaml"))
        expected = (
            "---\n"
            ":backends:\n"
            "  - yaml\n"
            ":yaml:\n"
            "  :datadir: /\n"
            ":hierarchy:\n"
            '  - "tmp/o"\n'
            f'  - "{PREFIX}/nodes/%{{::fqdn}}"\n'
            f'  - "{PREFIX}/roles/%{{::role}}"\n'
            f'  - "{PREFIX}/common"\n'
            ":logger: console\n"
        )
        self.assertEqual(out, expected)

    def test_unrelated_lines_pass_through(self) -> None:
        out = self.rw.rewrite_text(HIERA_YAML, DATA_DIR).splitlines(keepends=True)
        src = HIERA_YAML.splitlines(keepends=True)
        for idx in (0, 1, 2, 3, 5, 9):
            self.assertEqual(out[idx], src[idx])

    def test_block_ends_at_first_non_entry_line(self) -> None:
        src = ":hierarchy:\n  - common\n\n  - stray\n"
        out = self.rw.rewrite_text(src, DATA_DIR, Path("/o.yaml"))
        self.assertEqual(out, f':hierarchy:\n  - "o"\n  - "{PREFIX}/common"\n\n  - stray\n')

    def test_comment_ends_block(self) -> None:
        src = ":hierarchy:\n  - a\n# note\n  - b\n"
        out = self.rw.rewrite_text(src, DATA_DIR)
        self.assertEqual(out, f':hierarchy:\n  - "{PREFIX}/a"\n# note\n  - b\n')

    def test_empty_hierarchy_gets_no_override(self) -> None:
        src = ":hierarchy:\n:logger: console\n"
        self.assertEqual(self.rw.rewrite_text(src, DATA_DIR, Path("/o.yaml")), src)

    def test_missing_trailing_newline_is_kept(self) -> None:
        src = ":hierarchy:\n  - common"
        out = self.rw.rewrite_text(src, DATA_DIR, Path("/o.yaml"))
        self.assertEqual(out, f':hierarchy:\n  - "o"\n  - "{PREFIX}/common"')

    def test_inline_comments_stay_out_of_lookup_paths(self) -> None:
        src = ':hierarchy:\n  - "nodes/%{::fqdn}"  # per node\n  - common # base\n'
        out = self.rw.rewrite_text(src, Path("/srv/data"), Path("/o.yaml"))
        self.assertEqual(_hierarchy(out), ["o", "srv/data/nodes/%{::fqdn}", "srv/data/common"])
        self.assertEqual(
            out,
            ':hierarchy:\n  - "o"\n'
            '  - "srv/data/nodes/%{::fqdn}"  # per node\n'
            '  - "srv/data/common" # base\n',
        )

    def test_escaped_source_entry_is_not_escaped_twice(self) -> None:
        out = self.rw.rewrite_text(':hierarchy:\n  - "tab\\there"\n', Path("/d"))
        self.assertEqual(_hierarchy(out), ["d/tab\there"])

    def test_root_data_dir_adds_no_prefix(self) -> None:
        out = self.rw.rewrite_text(":hierarchy:\n  - c\n", Path("/"), Path("/x/y.d/o.yaml"))
        self.assertEqual(_hierarchy(out), ["x/y.d/o", "c"])

    def test_output_is_pure(self) -> None:
        args = (HIERA_YAML, DATA_DIR, Path("/tmp/o.yaml"))
        self.assertEqual(self.rw.rewrite_text(*args), self.rw.rewrite_text(*args))

    def test_source_document_is_not_mutated(self) -> None:
        doc = HieraDocument.parse(HIERA_YAML)
        self.rw.rewrite_document(doc, DATA_DIR, Path("/o.yaml"))
        self.assertEqual(doc.render(), HIERA_YAML)


class HieraRewriterFileTests(unittest.TestCase):
    def test_writes_target(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            src = write(root / "hiera.yaml", HIERA_YAML)
            data = root / "hieradata"
            data.mkdir()
            target = HieraRewriter().rewrite(src, data, root / "out.yaml")
            prefix = os.path.abspath(str(data))[1:]
            self.assertEqual(_hierarchy(target.read_text())[-1], f"{prefix}/common")

    def test_missing_source_raises_input_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(InputError):
                HieraRewriter().rewrite(Path(td) / "nope.yaml", Path(td), Path(td) / "out.yaml")
            self.assertFalse((Path(td) / "out.yaml").exists())

    def test_missing_data_dir_raises_input_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = write(Path(td) / "hiera.yaml", HIERA_YAML)
            with self.assertRaises(InputError):
                HieraRewriter().rewrite(src, Path(td) / "nodata", Path(td) / "out.yaml")


if __name__ == "__main__":
    unittest.main()
