"""Lookup-and-parse and list-head scenarios written with bind chains and do-notation."""

import pytest
from klaw_fx import Left, Nothing, Right, Some, do_either, do_option, from_nullable, head, try_catch

DATA = {'someValue': '23', 'badValue': 'abcd'}


def lookup_with_error(d, key):
    return Right(d[key]) if key in d else Left('can not find key')


def parse_with_error(s):
    return try_catch(int, s).map_left(lambda _: 'can not parse integer')


def parse(s):
    return try_catch(int, s).to_option()


@do_either
def lookup_and_parse(d, key):
    s = yield lookup_with_error(d, key)
    i = yield parse_with_error(s)
    return i * 1000


@do_option
def lookup_and_parse_option(d, key):
    s = yield from_nullable(d.get(key))
    i = yield parse(s)
    return i * 1000


class TestLookupAndParseWithErrorReason:
    """The failure reason survives the chain."""

    @pytest.mark.parametrize(
        ('key', 'expected'),
        [
            ('someValue', Right(23000)),
            ('notExistingValue', Left('can not find key')),
            ('badValue', Left('can not parse integer')),
        ],
    )
    def test_do_notation(self, key, expected):
        """@do_either reports the first failing step."""
        assert lookup_and_parse(DATA, key) == expected

    @pytest.mark.parametrize('key', ['someValue', 'notExistingValue', 'badValue'])
    def test_bind_chain_matches_do_notation(self, key):
        """bind with combine and a final map give the same result."""
        result = lookup_with_error(DATA, key).bind(parse_with_error, lambda _, i: i).map(lambda i: i * 1000)
        assert result == lookup_and_parse(DATA, key)


class TestLookupAndParseWithoutErrorReason:
    """Failures collapse into Nothing."""

    def test_succeeds(self):
        """A present, parseable value gives Some."""
        assert lookup_and_parse_option(DATA, 'someValue') == Some(23000)

    def test_missing_key(self):
        """A missing key gives Nothing."""
        assert lookup_and_parse_option(DATA, 'notExistingValue') == Nothing

    def test_bad_value(self):
        """An unparseable value gives Nothing."""
        assert lookup_and_parse_option(DATA, 'badValue') == Nothing

    def test_bind_chain(self):
        """The same lookup written with bind."""
        result = from_nullable(DATA.get('someValue')).bind(parse).map(lambda i: i * 1000)
        assert result == Some(23000)


class TestConsumeHeadsOfMultipleLists:
    """Combine the heads of several lists only when all of them exist."""

    @staticmethod
    def sum_heads(xs, ys, zs):
        return head(xs).bind(lambda a: head(ys).bind(lambda b: head(zs).map(lambda c: a + b + c)))

    def test_all_heads_present(self):
        """Three Some heads are summed."""
        assert self.sum_heads([1, 2, 3], [23, 42], [5000, 6000]) == Some(1 + 23 + 5000)

    def test_missing_head(self):
        """One empty list makes the whole computation Nothing."""
        calls = []

        @do_option
        def summed():
            a = yield head([1, 2, 3])
            b = yield head(iter([]))
            calls.append('summed')
            c = yield head([5000])
            return a + b + c

        assert self.sum_heads([1, 2, 3], [], [5000]) == Nothing
        assert summed() == Nothing
        assert calls == []
