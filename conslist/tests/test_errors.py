from conslist.errors import ClosedVariantError, ListError, MalformedListError
import unittest


class TestErrors(unittest.TestCase):
    def test_malformed_list_message(self) -> None:
        e = MalformedListError(None)
        self.assertEqual(
            'the rest of a Cons node must be a List, not NoneType', str(e)
        )
        self.assertEqual('MalformedListError(None)', repr(e))

    def test_closed_variant_message(self) -> None:
        e = ClosedVariantError(int)
        self.assertIn('int cannot extend a list', str(e))
        self.assertIs(int, e.cls)

    def test_hierarchy(self) -> None:
        for error in (MalformedListError(0), ClosedVariantError(int)):
            with self.subTest(error=error):
                self.assertIsInstance(error, ListError)
                self.assertIsInstance(error, TypeError)
