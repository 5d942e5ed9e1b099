import unittest

from app.locations.utils.pathing import to_native_path, to_uri_path


class TestPathing(unittest.TestCase):
    def test_windows_backslashes_and_drive(self) -> None:
        self.assertEqual(to_uri_path(r"C:\Users\Glen\Pics\A.JPG", windows=True), ("", "/C:/Users/Glen/Pics/A.JPG"))
        self.assertEqual(to_uri_path("c:\\foo\\", windows=True), ("", "/c:/foo/"))
        self.assertEqual(to_uri_path("c:\\", windows=True), ("", "/c:/"))

    def test_windows_unc(self) -> None:
        self.assertEqual(to_uri_path(r"\\server\share\x.txt", windows=True), ("server", "/share/x.txt"))

    def test_posix_keeps_backslashes(self) -> None:
        self.assertEqual(to_uri_path(r"/a\b", windows=False), ("", r"/a\b"))
        self.assertEqual(to_uri_path("relative/x", windows=False), ("", "/relative/x"))
        self.assertEqual(to_uri_path("", windows=True), ("", "/"))

    def test_native_round_trip(self) -> None:
        self.assertEqual(to_native_path("", "/c:/foo/bar", windows=True), r"c:\foo\bar")
        self.assertEqual(to_native_path("server", "/share/x", windows=True), r"\\server\share\x")
        self.assertEqual(to_native_path("", "/foo/bar", windows=False), "/foo/bar")


if __name__ == "__main__":
    unittest.main()
