import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import resource_accessor
from resource_accessor.accessors import FileSystemResourceAccessor, PackageResourceAccessor


class FileSystemResourceAccessorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name)
        (self.base / "db" / "sql" / "v2").mkdir(parents=True)
        (self.base / "db" / "changelog.xml").write_text("<databaseChangeLog/>")
        (self.base / "db" / "sql" / "001.sql").write_text("create table a (id int);")
        (self.base / "db" / "sql" / "v2" / "002.sql").write_text("create table b (id int);")
        self.accessor = FileSystemResourceAccessor(self.base)

    def _read_single(self, streams):
        self.assertEqual(len(streams), 1)
        stream = streams.pop()
        with stream:
            return stream.read()

    def test_relative_path_opens_file(self):
        streams = self.accessor.get_resources_as_stream("db/changelog.xml")
        self.assertEqual(self._read_single(streams), b"<databaseChangeLog/>")

    def test_file_url_is_accepted(self):
        uri = (self.base / "db" / "sql" / "001.sql").as_uri()
        self.assertEqual(self._read_single(self.accessor.get_resources_as_stream(uri)), b"create table a (id int);")

    def test_missing_or_directory_path_returns_empty_set(self):
        self.assertEqual(self.accessor.get_resources_as_stream("db/missing.xml"), set())
        self.assertEqual(self.accessor.get_resources_as_stream("db"), set())

    def test_list_direct_children(self):
        entries = self.accessor.list(None, "db", True, True, False)
        self.assertEqual(entries, {"db/changelog.xml", "db/sql/"})

    def test_list_recursive_files_only(self):
        entries = self.accessor.list(None, "db", True, False, True)
        self.assertEqual(entries, {"db/changelog.xml", "db/sql/001.sql", "db/sql/v2/002.sql"})

    def test_list_relative_to_changelog_file(self):
        entries = self.accessor.list("db/changelog.xml", "sql", True, True, False)
        self.assertEqual(entries, {"db/sql/001.sql", "db/sql/v2/"})

    def test_list_missing_directory_returns_none(self):
        self.assertIsNone(self.accessor.list(None, "nope", True, True, True))

    def test_class_loader_finds_modules_in_base_dir(self):
        (self.base / "migration_helpers_fixture.py").write_text("VALUE = 1\n")
        finder = self.accessor.to_class_loader()
        spec = finder.find_spec("migration_helpers_fixture")
        self.assertIsNotNone(spec)
        self.assertEqual(Path(spec.origin).name, "migration_helpers_fixture.py")


class PackageResourceAccessorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.accessor = PackageResourceAccessor("resource_accessor")

    def test_opens_bundled_resource(self):
        streams = self.accessor.get_resources_as_stream("accessors/url.py")
        self.assertEqual(len(streams), 1)
        with streams.pop() as stream:
            self.assertIn(b"class UrlResourceAccessor", stream.read())

    def test_missing_resource_returns_empty_set(self):
        self.assertEqual(self.accessor.get_resources_as_stream("accessors/missing.sql"), set())

    def test_list_package_directory(self):
        entries = self.accessor.list(None, "accessors", True, False, False)
        self.assertIn("accessors/url.py", entries)
        self.assertIn("accessors/composite.py", entries)

    def test_list_relative_to_resource(self):
        entries = self.accessor.list("accessors/url.py", ".", True, False, False)
        self.assertIn("accessors/file.py", entries)

    def test_list_missing_directory_returns_none(self):
        self.assertIsNone(self.accessor.list(None, "no_such_dir", True, True, False))

    def test_class_loader_finds_modules_in_package(self):
        finder = self.accessor.to_class_loader()
        spec = finder.find_spec("constants")
        self.assertIsNotNone(spec)
        self.assertEqual(Path(spec.origin).resolve().parent, Path(resource_accessor.__file__).resolve().parent)


if __name__ == '__main__':  # pragma: no cover
    unittest.main()
