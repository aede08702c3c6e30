#!/usr/bin/env python3
"""
Runs every test_ function in the test_*.py modules beside this file without pytest.
Run from project root: python3 pygaseos/tests/run_all_tests.py [module ...]
e.g. python3 pygaseos/tests/run_all_tests.py test_gerg
"""

import sys
import os
import glob
import importlib

tests_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(os.path.dirname(tests_dir)))


def main(selected=None):
    names = sorted(os.path.basename(f)[:-3] for f in glob.glob(os.path.join(tests_dir, 'test_*.py')))
    if selected:
        names = [n for n in names if n in selected]

    failures = []
    count = 0
    for name in names:
        mod = _load(name)
        for fname, func in sorted(vars(mod).items()):
            if not fname.startswith('test_') or not callable(func):
                continue
            count += 1
            try:
                func()
            except Exception as e:
                failures.append(f'{name}::{fname}: {e}')

    print(f'{count - len(failures)} of {count} tests passed')
    for line in failures:
        print(f'  FAIL {line}')
    return 1 if failures else 0


def _load(name):
    sys.path.insert(0, tests_dir)
    try:
        return importlib.import_module(name)
    finally:
        sys.path.remove(tests_dir)


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
