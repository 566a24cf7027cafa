# -*- coding: utf-8 -*-
import unittest

from multigeneric import ANY, MISSING, Method, MethodTable, class_name, resolve


def m1(x, y):
    return 'm1'


def m2(x, y):
    return 'm2'


def m3(x, y):
    return 'm3'


def make_table(*entries):
    table = MethodTable()
    for signature, func in entries:
        table.add(signature, Method('speak', signature, func))
    return table


class Local:
    pass


class TestClassName(unittest.TestCase):
    def test_builtins(self):
        self.assertEqual(class_name(int), 'int')
        self.assertEqual(class_name(object), 'object')

    def test_qualified(self):
        self.assertEqual(class_name(Local), __name__ + '.Local')

    def test_strings_are_interned(self):
        name = ''.join(['d', 'o', 'g'])
        self.assertIs(class_name(name), class_name('dog'))

    def test_invalid(self):
        with self.assertRaises(TypeError):
            class_name(1)
        with self.assertRaises(TypeError):
            class_name('')


class TestMethodTable(unittest.TestCase):
    def test_add_builds_nested_tables(self):
        table = make_table((('dog', 'cat'), m1), (('dog', ANY), m2))
        child = table.lookup('dog')
        self.assertIsInstance(child, MethodTable)
        self.assertIs(child.lookup('cat').func, m1)
        self.assertIs(child.lookup(ANY).func, m2)
        self.assertIsNone(table.lookup('cat'))

    def test_add_returns_previous(self):
        table = make_table((('dog', 'cat'), m1))
        previous = table.add(('dog', 'cat'), Method('speak', ('dog', 'cat'), m2))
        self.assertIs(previous.func, m1)
        self.assertIs(table.lookup('dog').lookup('cat').func, m2)

    def test_add_rejects_mixed_depths(self):
        table = make_table((('dog', 'cat'), m1))
        with self.assertRaises(TypeError):
            table.add(('dog',), Method('speak', ('dog',), m2))
        table = make_table((('dog',), m1))
        with self.assertRaises(TypeError):
            table.add(('dog', 'cat'), Method('speak', ('dog', 'cat'), m2))

    def test_iteration(self):
        table = make_table((('dog', 'cat'), m1), (('dog', ANY), m2), ((ANY, ANY), m3))
        self.assertEqual([m.func for m in table], [m1, m2, m3])
        self.assertEqual(len(table), 3)
        self.assertEqual(set(table.children), {'dog', ANY})

    def test_children_read_only(self):
        table = MethodTable()
        with self.assertRaises(TypeError):
            table.children['dog'] = m1

    def test_method_repr_and_call(self):
        m = Method('speak', ('dog', 'cat'), m1)
        self.assertEqual(repr(m), '<method speak(dog, cat)>')
        self.assertEqual(m(1, 2), 'm1')
        self.assertEqual(m.__name__, 'm1')


class TestResolve(unittest.TestCase):
    def setUp(self):
        self.table = make_table((('dog', 'cat'), m1), (('dog', ANY), m2), ((ANY, ANY), m3))

    def resolve(self, *signature):
        found = resolve(self.table, signature)
        return found.func if found is not None else None

    def test_most_specific(self):
        self.assertIs(self.resolve(('dog', 'animal'), ('cat', 'animal')), m1)

    def test_wildcard_at_second_level(self):
        self.assertIs(self.resolve(('dog', 'animal'), ('bird', 'animal')), m2)

    def test_wildcard_at_first_level(self):
        self.assertIs(self.resolve(('fish', 'animal'), ('cat', 'animal')), m3)

    def test_less_specific_class_before_wildcard(self):
        table = make_table((('A', 'B'), m1), (('A', 'Y'), m2), ((ANY, ANY), m3))
        self.assertIs(resolve(table, (('A', 'X'), ('B', 'Y'))).func, m1)
        table = make_table((('A', 'Y'), m2), ((ANY, ANY), m3))
        self.assertIs(resolve(table, (('A', 'X'), ('B', 'Y'))).func, m2)

    def test_left_first(self):
        table = make_table((('A', 'Y'), m1), (('X', 'B'), m2))
        self.assertIs(resolve(table, (('A', 'X'), ('B', 'Y'))).func, m1)

    def test_falls_back_to_less_specific_class_at_first_level(self):
        table = make_table((('dog', 'cat'), m1), (('animal', 'bird'), m2))
        self.assertIs(resolve(table, (('dog', 'animal'), ('bird', 'animal'))).func, m2)

    def test_absent(self):
        table = make_table((('dog', 'cat'), m1))
        self.assertIsNone(resolve(table, (('dog',), ('bird',))))
        self.assertIsNone(resolve(MethodTable(), (('dog',),)))
        self.assertIsNone(resolve(table, ()))

    def test_missing_is_a_key(self):
        table = make_table((('dog', MISSING), m1), (('dog', ANY), m2))
        self.assertIs(resolve(table, (('dog',), (MISSING,))).func, m1)

    def test_methods_at_wrong_depth_are_ignored(self):
        table = make_table((('dog',), m1))
        self.assertIsNone(resolve(table, (('dog',), ('cat',))))
        table = make_table((('dog', 'cat'), m1))
        self.assertIsNone(resolve(table, (('dog',),)))

    def test_pure(self):
        signature = (('dog', 'animal'), ('cat', 'animal'))
        self.assertIs(resolve(self.table, signature), resolve(self.table, signature))
        self.assertEqual(len(self.table), 3)


if __name__ == '__main__':
    unittest.main()
