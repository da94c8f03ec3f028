from decimal import Decimal
from unittest import TestCase

import pickle

from ddt import ddt, data, unpack

from decset import Boundary, Cursor, LOWER, UPPER, POINT, INC, EXC
from decset.boundaries import lower, upper, point, membership, idle, boundary_at


D = Decimal


@ddt
class BoundaryTest(TestCase):

    def test_factories(self):
        # Act
        lo = lower(D(1), EXC)
        up = upper(D(2))
        pt = point(D(3))

        # Assert
        self.assertEqual((D(1), LOWER, True), (lo.value, lo.kind, lo.open))
        self.assertEqual((D(2), UPPER, False), (up.value, up.kind, up.open))
        self.assertEqual((D(3), POINT, False), (pt.value, pt.kind, pt.open))
        self.assertTrue(up.closed)

    def test_illegal_kind(self):
        self.assertRaises(ValueError, Boundary, D(0), 4)

    def test_equality_and_hash(self):
        self.assertEqual(lower(D(1)), Boundary(D(1), LOWER, INC))
        self.assertEqual(hash(lower(D(1))), hash(Boundary(D('1.0'), LOWER, INC)))
        self.assertNotEqual(lower(D(1)), lower(D(1), EXC))
        self.assertNotEqual(lower(D(1)), upper(D(1)))

    @data(lower(D(0), EXC), upper(D('2.5')), point(D(-1)))
    def test_serialization(self, b):
        self.assertEqual(b, pickle.loads(pickle.dumps(b)))

    def test_repr(self):
        self.assertEqual('<LOWER 0 open>', repr(lower(D(0), EXC)))
        self.assertEqual('<POINT 2.0>', repr(point(D('2.0'))))


# ----------------------------------------------------------------------------------------------------------------------

@ddt
class CursorTest(TestCase):

    @data(
        (Cursor.OUTSIDE, lower(D(0)), Cursor.INSIDE),
        (Cursor.INSIDE, upper(D(0)), Cursor.OUTSIDE),
        (Cursor.OUTSIDE, point(D(0)), Cursor.OUTSIDE),
        (Cursor.INSIDE, point(D(0)), Cursor.INSIDE),
    )
    @unpack
    def test_advance(self, cursor, b, truth):
        self.assertEqual(truth, cursor.advance(b))

    def test_inside(self):
        self.assertTrue(Cursor.INSIDE.inside)
        self.assertFalse(Cursor.OUTSIDE.inside)


# ----------------------------------------------------------------------------------------------------------------------

@ddt
class MembershipTest(TestCase):

    @data(
        (lower(D(0)), Cursor.OUTSIDE, (False, True, True)),
        (lower(D(0), EXC), Cursor.OUTSIDE, (False, False, True)),
        (upper(D(0)), Cursor.INSIDE, (True, True, False)),
        (upper(D(0), EXC), Cursor.INSIDE, (True, False, False)),
        (point(D(0)), Cursor.OUTSIDE, (False, True, False)),
        (point(D(0)), Cursor.INSIDE, (True, False, True)),
    )
    @unpack
    def test_membership(self, b, cursor, truth):
        self.assertEqual(truth, membership(b, cursor))

    def test_idle(self):
        self.assertEqual((True, True, True), idle(Cursor.INSIDE))
        self.assertEqual((False, False, False), idle(Cursor.OUTSIDE))

    @data(
        ((False, True, True), lower(D(7))),
        ((False, False, True), lower(D(7), EXC)),
        ((True, True, False), upper(D(7))),
        ((True, False, False), upper(D(7), EXC)),
        ((False, True, False), point(D(7))),
        ((True, False, True), point(D(7))),
        ((True, True, True), None),
        ((False, False, False), None),
    )
    @unpack
    def test_boundary_at(self, triple, truth):
        self.assertEqual(truth, boundary_at(D(7), *triple))

