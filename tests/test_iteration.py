#!/usr/bin/env python3

# Copyright 2019 Jake Magers
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import itertools
import logging
import unittest
import rize as rz


class TestDictMaps(unittest.TestCase):
    def test_hmap_identity(self):
        d = {'a': 1, 'b': 2}
        self.assertEqual(rz.hmap(lambda k, v: (k, v), d), d)

    def test_hmap(self):
        self.assertEqual(rz.hmap(lambda k, v: (k.upper(), v + 1),
                                 {'a': 1, 'b': 2}),
                         {'A': 2, 'B': 3})

    def test_hmap_does_not_mutate(self):
        d = {'a': 1}
        rz.hmap(lambda k, v: (k * 2, v), d)
        self.assertEqual(d, {'a': 1})

    def test_hkeymap(self):
        self.assertEqual(rz.hkeymap(str, {1: 'a', 2: 'b'}),
                         {'1': 'a', '2': 'b'})

    def test_hvalmap(self):
        self.assertEqual(rz.hvalmap(str, {'a': 1, 'b': 2}),
                         {'a': '1', 'b': '2'})


class TestHeadTail(unittest.TestCase):
    def test_hd(self):
        self.assertEqual(rz.hd([1, 2, 3]), 1)
        self.assertEqual(rz.hd(iter('xyz')), 'x')

    def test_hd_empty(self):
        self.assertIsNone(rz.hd([]))

    def test_tl(self):
        self.assertEqual(rz.tl([1, 2, 3]), [2, 3])
        self.assertEqual(rz.tl((1,)), [])

    def test_tl_empty(self):
        self.assertEqual(rz.tl([]), [])


class TestFrequencies(unittest.TestCase):
    def test_key_function(self):
        self.assertEqual(rz.frequencies(lambda x: x % 2 == 0, [1, 2, 3, 1]),
                         {True: 1, False: 3})

    def test_identity(self):
        self.assertEqual(rz.frequencies(lambda x: x, [1, 2, 3, 1]),
                         {1: 2, 2: 1, 3: 1})

    def test_without_key_function(self):
        self.assertEqual(rz.frequencies('abca'), {'a': 2, 'b': 1, 'c': 1})

    def test_empty(self):
        self.assertEqual(rz.frequencies(len, []), {})


class TestMapN(unittest.TestCase):
    def test_sum(self):
        self.assertEqual(rz.map_n(lambda *args: sum(args),
                                  [1, 2, 3], [4, 5, 6], [7, 8, 9]),
                         [12, 15, 18])

    def test_positional_order(self):
        self.assertEqual(rz.map_n(lambda a, b, c: (a - b) * c,
                                  [1, 2, 3], [4, 5, 6], [7, 8, 9]),
                         [-21, -24, -27])

    def test_unequal_length(self):
        calls = []
        with self.assertRaises(rz.UnequalLengthError) as cm:
            rz.map_n(lambda *args: calls.append(args), [1, 2], [1, 2, 3])
        self.assertEqual(str(cm.exception),
                         'Expected all inputs to be of length 2')
        self.assertEqual(calls, [])

    def test_unequal_length_is_value_error(self):
        with self.assertRaises(ValueError):
            rz.map_n(max, [1], [])

    def test_no_sequences(self):
        self.assertEqual(rz.map_n(lambda: 1), [])

    def test_unequal_length_is_logged(self):
        with self.assertLogs('rize.iteration', 'DEBUG') as cm:
            with self.assertRaises(rz.UnequalLengthError):
                rz.map_n(max, [1], [])
        self.assertEqual(cm.output,
                         ['DEBUG:rize.iteration:'
                          'rejecting sequences of lengths [1, 0]'])


class TestLogging(unittest.TestCase):
    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger('rize').handlers
        self.assertTrue(any(isinstance(h, logging.NullHandler)
                            for h in handlers))


class TestEachN(unittest.TestCase):
    def test_calls_in_order(self):
        calls = []
        ret = rz.each_n(lambda a, b: calls.append((a, b)), [1, 2], 'xy')
        self.assertEqual(calls, [(1, 'x'), (2, 'y')])
        self.assertEqual(ret, [(1, 'x'), (2, 'y')])

    def test_no_sequences(self):
        self.assertEqual(rz.each_n(lambda: None), [])

    def test_unequal_length_before_any_call(self):
        calls = []
        with self.assertRaises(rz.UnequalLengthError):
            rz.each_n(lambda *args: calls.append(args), [1, 2, 3], [1, 2])
        self.assertEqual(calls, [])


class TestRepeat(unittest.TestCase):
    def test_repeat(self):
        counter = itertools.count()
        self.assertEqual(rz.repeat(lambda: next(counter), 3), [0, 1, 2])

    def test_repeat_zero(self):
        self.assertEqual(rz.repeat(lambda: 1, 0), [])

    def test_lazy_repeat_is_lazy(self):
        calls = []
        it = rz.lazy_repeat(lambda: calls.append(None) or len(calls))
        self.assertEqual(calls, [])
        self.assertEqual(list(itertools.islice(it, 3)), [1, 2, 3])
        self.assertEqual(len(calls), 3)


class TestFlatterMap(unittest.TestCase):
    def test_deep_flatten(self):
        self.assertEqual(rz.flatter_map(lambda x: x + 1, [1, [2, [3, (4,)]]]),
                         [2, 3, 4, 5])

    def test_splices_one_level(self):
        self.assertEqual(rz.flatter_map(lambda x: [x, [x]], [1, [2]]),
                         [1, [1], 2, [2]])

    def test_strings_are_not_flattened(self):
        self.assertEqual(rz.flatter_map(str.upper, ['ab', ['cd']]),
                         ['AB', 'CD'])

    def test_empty(self):
        self.assertEqual(rz.flatter_map(lambda x: x, [[], [[]]]), [])


if __name__ == '__main__':
    unittest.main()
