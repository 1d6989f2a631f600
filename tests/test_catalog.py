#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_catalog.py - Unit tests for the zeka.core.catalog module

This module contains unit tests for listing the objects in a repository and
extracting their display titles.
"""

import sys
import os
import unittest
import tempfile

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from zeka.core.catalog import (
    list_objects,
    reference_description,
    reference_label,
)
from zeka.core.objects import ObjectType


def write(path, contents):
    with open(path, "w", encoding="utf-8") as f:
        f.write(contents)


class CatalogTestCase(unittest.TestCase):
    """Base class providing a temporary repository."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.repo = self._tmp.name
        for subdir in ("notes", "references", "attachments", "sketches"):
            os.makedirs(os.path.join(self.repo, subdir))

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, subdir, name, contents=""):
        path = os.path.join(self.repo, subdir, name)
        write(path, contents)
        return path

    def entries_by_id(self):
        return {e.id: e for e in list_objects(self.repo)}


class TestNotes(CatalogTestCase):
    """Test cases for note entries."""

    def test_heading_title(self):
        """Test a first-line heading becomes the label."""
        path = self.write("notes", "020200514084500-intro.md", "# The Introduction\n\nBody\n")
        entry = self.entries_by_id()["020200514084500"]
        self.assertEqual(entry.label, "The Introduction")
        self.assertEqual(entry.description, "")
        self.assertEqual(entry.source_type, ObjectType.NOTE)
        self.assertEqual(entry.path, path)

    def test_no_heading(self):
        """Test notes without a heading keep the file name title."""
        self.write("notes", "020200514084500-intro.md", "Just text\n# Late heading\n")
        self.assertEqual(self.entries_by_id()["020200514084500"].label, "intro")

    def test_second_level_heading_ignored(self):
        """Test only a "# " heading counts."""
        self.write("notes", "020200514084500-intro.md", "## Sub\n")
        self.assertEqual(self.entries_by_id()["020200514084500"].label, "intro")

    def test_empty_note(self):
        """Test an empty note keeps the file name title."""
        self.write("notes", "020200514084500-Empty_Note.md", "")
        self.assertEqual(self.entries_by_id()["020200514084500"].label, "Empty_Note")

    def test_sketches_not_listed(self):
        """Test sketches are not offered as link targets."""
        self.write("sketches", "020200514084500-idea.md", "# Idea\n")
        self.assertEqual(list_objects(self.repo), [])


class TestReferences(CatalogTestCase):
    """Test cases for reference entries."""

    def test_title_and_subtitle(self):
        """Test title and subtitle are joined with a colon."""
        self.write("references", "020200514084500-a.toml", 'title = "A"\nsubtitle = "B"\n')
        self.assertEqual(self.entries_by_id()["020200514084500"].label, "A: B")

    def test_bad_subtitle(self):
        """Test a non-string subtitle is skipped with a warning."""
        self.write("references", "020200514084500-a.toml", 'title = "A"\nsubtitle = 5\n')
        self.write("references", "020200514084501-c.toml", 'title = "C"\n')
        self.write("notes", "020200514084502-n.md", "# N\n")

        with self.assertLogs("zeka.core.catalog", level="WARNING") as logs:
            entries = self.entries_by_id()

        self.assertEqual(entries["020200514084500"].label, "A")
        self.assertEqual(entries["020200514084501"].label, "C")
        self.assertEqual(entries["020200514084502"].label, "N")
        self.assertTrue(any("subtitle" in line for line in logs.output))

    def test_full_reference(self):
        """Test title list, edition and authors."""
        self.write("references", "020200514084500-taocp.toml",
                   'type = "book"\n'
                   'title = ["The Art of", "Computer Programming"]\n'
                   'subtitle = "Fundamental Algorithms"\n'
                   'author = ["Donald Knuth", "Someone Else"]\n'
                   'edition = 3\n')
        entry = self.entries_by_id()["020200514084500"]
        self.assertEqual(entry.label,
                         "The Art of; Computer Programming: Fundamental Algorithms, 3Ed.")
        self.assertEqual(entry.description, "Donald Knuth; Someone Else")
        self.assertEqual(entry.source_type, ObjectType.REFERENCE)

    def test_string_edition(self):
        """Test string editions are used as they are."""
        self.write("references", "020200514084500-a.toml",
                   'title = "A"\nedition = "Special "\nauthor = "Me"\n')
        entry = self.entries_by_id()["020200514084500"]
        self.assertEqual(entry.label, "A, Special Ed.")
        self.assertEqual(entry.description, "Me")

    def test_unparsable_reference(self):
        """Test a broken TOML document falls back to the file name."""
        self.write("references", "020200514084500-Fresh_Book.toml",
                   'type = "book"\ntitle = "Fresh"\nyear =\n')
        with self.assertLogs("zeka.core.catalog", level="WARNING"):
            entry = self.entries_by_id()["020200514084500"]
        self.assertEqual(entry.label, "Fresh_Book")
        self.assertEqual(entry.description, "")

    def test_missing_title(self):
        """Test a reference without a title keeps the file name title."""
        self.write("references", "020200514084500-Untitled.toml", 'author = "X"\n')
        entry = self.entries_by_id()["020200514084500"]
        self.assertEqual(entry.label, "Untitled")
        self.assertEqual(entry.description, "X")


class TestReferenceFields(unittest.TestCase):
    """Test cases for building reference labels from parsed documents."""

    def test_empty_subtitle_skipped(self):
        """Test an empty subtitle adds nothing."""
        self.assertEqual(reference_label({"title": "A", "subtitle": ""}, "d"), "A")

    def test_float_edition(self):
        """Test numeric editions are accepted."""
        self.assertEqual(reference_label({"title": "A", "edition": 2.5}, "d"), "A, 2.5Ed.")

    def test_bad_edition(self):
        """Test boolean and list editions are skipped with a warning."""
        for edition in (True, [1]):
            with self.assertLogs("zeka.core.catalog", level="WARNING"):
                self.assertEqual(reference_label({"title": "A", "edition": edition}, "d"), "A")

    def test_bad_title(self):
        """Test a non-string title falls back to the default."""
        with self.assertLogs("zeka.core.catalog", level="WARNING"):
            self.assertEqual(reference_label({"title": 42, "subtitle": "S"}, "d"), "d: S")

    def test_bad_author(self):
        """Test a malformed author list gives an empty description."""
        with self.assertLogs("zeka.core.catalog", level="WARNING"):
            self.assertEqual(reference_description({"author": ["A", 1]}), "")
        self.assertEqual(reference_description({}), "")


class TestScan(CatalogTestCase):
    """Test cases for scanning the repository."""

    def test_attachments(self):
        """Test attachments use the file name title and no description."""
        self.write("attachments", "020200514090000-diagram.png", "binary")
        entry = self.entries_by_id()["020200514090000"]
        self.assertEqual(entry.label, "diagram")
        self.assertEqual(entry.description, "")
        self.assertEqual(entry.source_type, ObjectType.ATTACHMENT)

    def test_badly_named_files_skipped(self):
        """Test files not named like objects are skipped with a warning."""
        self.write("notes", "README.md", "# Readme\n")
        self.write("notes", "02020051408450-short.md", "# Short\n")
        self.write("notes", "020200514084500-ok.md", "# Ok\n")

        with self.assertLogs("zeka.core.catalog", level="WARNING") as logs:
            entries = list_objects(self.repo)

        self.assertEqual([e.label for e in entries], ["Ok"])
        self.assertEqual(len(logs.output), 2)

    def test_malformed_ids_skipped(self):
        """Test names with impossible dates or non-ASCII digits are skipped."""
        self.write("notes", "020201399999999-bad_date.md", "# Bad date\n")
        self.write("notes", "\u0660" * 15 + "-arabic.md", "# Arabic\n")
        self.write("notes", "020200514084500-ok.md", "# Ok\n")

        with self.assertLogs("zeka.core.catalog", level="WARNING") as logs:
            entries = list_objects(self.repo)

        self.assertEqual([e.id for e in entries], ["020200514084500"])
        self.assertEqual(len(logs.output), 2)

    def test_subdirectories_skipped(self):
        """Test directories inside a type directory are not objects."""
        os.makedirs(os.path.join(self.repo, "attachments", "020200514090000-folder"))
        self.assertEqual(list_objects(self.repo), [])

    def test_missing_directory(self):
        """Test a missing type directory is skipped with a warning."""
        os.rmdir(os.path.join(self.repo, "attachments"))
        self.write("notes", "020200514084500-ok.md", "# Ok\n")
        with self.assertLogs("zeka.core.catalog", level="WARNING"):
            entries = list_objects(self.repo)
        self.assertEqual(len(entries), 1)

    def test_grouped_by_type(self):
        """Test notes come before references and references before attachments."""
        self.write("attachments", "020200514090000-a.png")
        self.write("references", "020200514090001-r.toml", 'title = "R"\n')
        self.write("notes", "020200514090002-n.md", "# N\n")
        types = [e.source_type for e in list_objects(self.repo)]
        self.assertEqual(types, [ObjectType.NOTE, ObjectType.REFERENCE, ObjectType.ATTACHMENT])

    def test_not_cached(self):
        """Test a new file shows up on the next scan."""
        self.assertEqual(list_objects(self.repo), [])
        self.write("notes", "020200514084500-ok.md", "# Ok\n")
        self.assertEqual(len(list_objects(self.repo)), 1)


if __name__ == '__main__':
    unittest.main()
