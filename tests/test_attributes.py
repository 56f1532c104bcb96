import unittest

from tagblocks.compiler.attributes import (
    Attribute,
    extract_attributes,
    iter_attributes,
    parse_attribute_string,
    serialize_attributes,
    strip_quotes,
)


class TestAttributeParsing(unittest.TestCase):
    def test_empty_region(self) -> None:
        self.assertEqual(parse_attribute_string(""), "{}")
        self.assertEqual(parse_attribute_string("   \n "), "{}")

    def test_literal_values(self) -> None:
        self.assertEqual(
            extract_attributes(' title="Hi" alt=\'Photo\' size=lg'),
            {"title": '"Hi"', "alt": '"Photo"', "size": '"lg"'},
        )

    def test_empty_quoted_value(self) -> None:
        self.assertEqual(extract_attributes('title=""'), {"title": '""'})

    def test_bound_values(self) -> None:
        self.assertEqual(
            extract_attributes(' :items="[1, 2]" :user=\'current_user\''),
            {"items": "[1, 2]", "user": "current_user"},
        )

    def test_bound_without_value(self) -> None:
        self.assertEqual(extract_attributes(":open"), {"open": "true"})

    def test_interpolation_is_unwrapped(self) -> None:
        self.assertEqual(
            extract_attributes('title="{{ post.title }}"'), {"title": "post.title"}
        )

    def test_two_interpolations_stay_literal(self) -> None:
        self.assertEqual(
            extract_attributes('title="{{ a }} {{ b }}"'),
            {"title": '"{{ a }} {{ b }}"'},
        )

    def test_backslash_and_quote_are_escaped(self) -> None:
        self.assertEqual(
            extract_attributes("path='C:\\dir \"x\"'"),
            {"path": '"C:\\\\dir \\"x\\""'},
        )

    def test_names_with_punctuation(self) -> None:
        self.assertEqual(
            extract_attributes('@click="go()" data-id="7" x.y="z"'),
            {"@click": '"go()"', "data-id": '"7"', "x.y": '"z"'},
        )

    def test_unterminated_quote_drops_attribute(self) -> None:
        self.assertEqual(extract_attributes('title="abc'), {})
        self.assertEqual(extract_attributes('a="1" title="abc def'), {"a": '"1"'})

    def test_empty_expression_becomes_empty_string(self) -> None:
        self.assertEqual(
            extract_attributes('title="{{}}" :n="" :m=" "'),
            {"title": '""', "n": '""', "m": '""'},
        )

    def test_hash_brace_is_escaped(self) -> None:
        self.assertEqual(extract_attributes("t='#{x}'"), {"t": '"\\#{x}"'})

    def test_malformed_value_is_skipped(self) -> None:
        self.assertEqual(extract_attributes("a==b c"), {"c": "true"})

    def test_order_and_duplicates(self) -> None:
        self.assertEqual(
            parse_attribute_string('b="2" a="1" b="3"'), "{'b': \"3\", 'a': \"1\"}"
        )

    def test_iter_attributes_reports_binding(self) -> None:
        self.assertEqual(
            list(iter_attributes('a="x" :b="y" c="{{ z }}" d')),
            [
                Attribute(name="a", expression='"x"', bound=False),
                Attribute(name="b", expression="y", bound=True),
                Attribute(name="c", expression="z", bound=True),
                Attribute(name="d", expression="true", bound=False),
            ],
        )


class TestAttributeBag(unittest.TestCase):
    def test_plain_bag(self) -> None:
        self.assertEqual(
            list(iter_attributes(" {{ $attributes }}")),
            [Attribute(name="attributes", expression="$attributes", bound=True)],
        )
        self.assertEqual(
            extract_attributes("{{ $attributes }}"), {"attributes": "$attributes"}
        )

    def test_bag_with_double_quotes(self) -> None:
        self.assertEqual(
            extract_attributes(' {{ $attributes.merge({"class": "card"}) }}'),
            {"attributes": '$attributes.merge({"class": "card"})'},
        )

    def test_bag_next_to_other_attributes(self) -> None:
        self.assertEqual(
            parse_attribute_string(' id="x" {{ $attributes.only("class") }} :n="1"'),
            "{'id': \"x\", 'attributes': $attributes.only(\"class\"), 'n': 1}",
        )

    def test_bag_must_stand_alone(self) -> None:
        # Glued to a previous token it is not a bag reference
        self.assertEqual(extract_attributes('a="1"{{ $attributes }}'), {"a": '"1"'})

    def test_bag_inside_quoted_value_is_text(self) -> None:
        self.assertEqual(
            extract_attributes('class="btn {{ $attributes.get(\'class\') }}"'),
            {"class": '"btn {{ $attributes.get(\'class\') }}"'},
        )

    def test_bag_with_both_quote_styles(self) -> None:
        self.assertEqual(
            extract_attributes(' {{ $attributes.merge({"c": \'x\'}) }}'),
            {"attributes": '$attributes.merge({"c": \'x\'})'},
        )


class TestHelpers(unittest.TestCase):
    def test_strip_quotes(self) -> None:
        self.assertEqual(strip_quotes('"a"'), "a")
        self.assertEqual(strip_quotes("'a'"), "a")
        self.assertEqual(strip_quotes("a"), "a")
        self.assertEqual(strip_quotes(""), "")

    def test_serialize(self) -> None:
        self.assertEqual(serialize_attributes({}), "{}")
        self.assertEqual(
            serialize_attributes({"a": "true", "b": '"x"'}), "{'a': true, 'b': \"x\"}"
        )


if __name__ == "__main__":
    unittest.main()
