import unittest

from vnode.nodes import TextNode
from vnode.render import escape, render


class EscapeTest(unittest.TestCase):
    def test_escapes_all_five_characters(self) -> None:
        self.assertEqual(escape("&<>'\""), "&amp;&lt;&gt;&apos;&quot;")

    def test_ampersand_is_escaped_once(self) -> None:
        self.assertEqual(escape("a&b<c"), "a&amp;b&lt;c")
        self.assertEqual(escape("<"), "&lt;")

    def test_plain_text_unchanged(self) -> None:
        self.assertEqual(escape("hello world"), "hello world")
        self.assertEqual(escape(""), "")

    def test_text_node_renders_escaped(self) -> None:
        text = "Tom & Jerry say \"<hi>\" isn't it"
        self.assertEqual(render(TextNode(text)), escape(text))


if __name__ == "__main__":
    unittest.main()
