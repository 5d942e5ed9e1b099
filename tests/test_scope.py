import unittest

from app.locations.scope import is_in_scope, normalize_roots
from app.locations.uri import from_components, from_file_path, parse


class TestScope(unittest.TestCase):
    def test_normalize_roots_drops_nested_and_blank(self) -> None:
        cats = from_file_path("/media/cats", windows=False)
        roots = normalize_roots(
            [
                cats,
                None,
                from_components(scheme="file"),
                from_file_path("/media/cats/kittens", windows=False),
                from_file_path("/media/cats/", windows=False),
                from_file_path("/media/dogs", windows=False),
            ],
            windows=False,
        )
        self.assertEqual([r.path for r in roots], ["/media/cats", "/media/dogs"])
        self.assertIs(roots[0], cats)

    def test_windows_roots_ignore_case(self) -> None:
        roots = normalize_roots(
            [from_file_path(r"C:\Media\Cats", windows=True), from_file_path("c:/media/cats/", windows=True)],
            windows=True,
        )
        self.assertEqual(len(roots), 1)

    def test_authority_only_root(self) -> None:
        root = parse("foo://server")
        self.assertEqual(normalize_roots([root, parse("foo://server/x")]), [root])
        self.assertTrue(is_in_scope(parse("foo://server/x"), [root]))
        self.assertFalse(is_in_scope(parse("foo://other/x"), [root]))

    def test_is_in_scope_true_for_descendant_and_root(self) -> None:
        root = from_file_path(r"C:\Users\Glen\Pics", windows=True)
        self.assertTrue(is_in_scope(from_file_path(r"c:\users\glen\pics\cats\x.png", windows=True), [root], windows=True))
        self.assertTrue(is_in_scope(from_file_path(r"C:\Users\Glen\Pics", windows=True), [root], windows=True))

    def test_is_in_scope_false_for_sibling(self) -> None:
        root = from_file_path(r"C:\Users\Glen\Pics", windows=True)
        self.assertFalse(is_in_scope(from_file_path(r"C:\Users\Glen\Pictures\x.png", windows=True), [root], windows=True))
        self.assertFalse(is_in_scope(from_file_path("/media/x", windows=False), [], windows=False))


if __name__ == "__main__":
    unittest.main()
