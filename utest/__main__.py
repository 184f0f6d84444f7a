#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep, walk
from os.path import isfile as is_file, join as path_join
from subprocess import run
from sys import executable
from typing import Iterable, Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  # Each test runs in its own interpreter; make the working directory importable so that tests run from a checkout.
  env = dict(environ)
  env['PYTHONPATH'] = pathsep.join(p for p in (getcwd(), environ.get('PYTHONPATH')) if p)

  ok = True
  count = 0
  for path in walk_ut_files(args.paths):
    print(path)
    count += 1
    if run([executable, path], env=env).returncode != 0:
      ok = False
      print()

  if not count: exit(f'utest: no ".ut.py" files found in: {" ".join(args.paths)}')
  exit(0 if ok else 1)


def walk_ut_files(paths:Iterable[str]) -> Iterator[str]:
  'Yield the paths of all ".ut.py" files in `paths`, in sorted order; file paths are yielded as is.'
  for path in paths:
    if is_file(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
