import re

from views import SequenceView, InvalidArgumentError, UnsupportedOperationError
from predicates import contains_pattern, starts_with, or_, not_
from functions import compose, for_predicate
from utils import setup_logging, describe_view

setup_logging()

names = ["John", "Jane", "Adam", "Tom"]
people = SequenceView(names)

print("\n--- Demo: filtered views are live ---")
with_a = people.filter(contains_pattern("a", re.IGNORECASE))
print(f"Names containing 'a': {with_a.to_list()}")

with_a.add("Anna")
print(f"After adding 'Anna' through the view, backing list: {names}")

names.append("Sarah")
print(f"After appending 'Sarah' to the list, view sees: {with_a.to_list()}")

print("\n--- Demo: invalid writes are rejected ---")
try:
    with_a.add("Elvis")
except InvalidArgumentError as e:
    print(f"add('Elvis') rejected: {e}")
print(f"Backing list unchanged: {names}")

lengths = people.map(len)
try:
    lengths.add(7)
except UnsupportedOperationError as e:
    print(f"add(7) on mapped view rejected: {e}")

print("\n--- Demo: removing through a mapped view ---")
print(f"Lengths: {lengths.to_list()}")
lengths.remove(3)
print(f"After remove(3), backing list: {names}")

print("\n--- Demo: combinators and fluent chaining ---")
people = SequenceView(["John", "Jane", "Adam", "Tom"])
j_or_no_a = people.filter(or_(contains_pattern("J"), not_(contains_pattern("a"))))
print(f"Contains 'J' or no 'a': {j_or_no_a.to_list()}")

even_length = compose(lambda n: n % 2 == 0, len)
print(f"Even length: {people.map(even_length).to_list()}")
print(f"Contains 'm': {people.map(for_predicate(contains_pattern('m'))).to_list()}")

pipeline = people.filter(starts_with("A", "T")).map(len)
print(f"Pipeline {describe_view(pipeline)} -> {pipeline.to_list()}")
