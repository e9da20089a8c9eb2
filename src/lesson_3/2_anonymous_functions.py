# # Anonymous Functions and Closures in Python
#
# This lesson covers anonymous functions (`lambda`) and closures. Both help
# you write short, flexible code, especially in a functional style.

# ## Basic Syntax for Anonymous Functions
#
# `lambda parameters: expression` creates a function without a name. The
# expression is returned automatically. The simplest example doubles a
# number:

(lambda x: x * 2)(4)  # returns 8

# A lambda can take several arguments:

difference = lambda x, y: x - y
difference(10, 4)  # returns 6

# A `lambda` body is a single expression. For anything that needs several
# statements, use `def`:

def shifted_square(x):
    y = x + 3
    return y ** 2

shifted_square(2)  # returns 25

# ## Typical Use Cases
#
# Anonymous functions shine as arguments to higher-order functions like
# `map`, `filter`, and `sorted`.

# ### Map

numbers = [1, 2, 3, 4]
doubled = list(map(lambda x: x * 2, numbers))  # [2, 4, 6, 8]
print(doubled)

# ### Filter

odds = list(filter(lambda x: x % 2 != 0, numbers))  # [1, 3]
print(odds)

# ### Sorted

fruits = ["kiwi", "apple", "orange"]
sorted_by_last = sorted(fruits, key=lambda s: s[-1])  # "apple", "orange", "kiwi"
print(sorted_by_last)

# `key` is called once per item and the items are ordered by its result:
# "apple" and "orange" both end in "e", and since Python's sort is stable
# they keep their original order ahead of "kiwi".

# ## Assigning to a Variable
#
# A lambda can be stored in a variable for reuse:

triple = lambda x: x * 3
result = triple(6)  # 18
print(result)

# Style guides prefer `def triple(x): return x * 3` for named functions, but
# the two behave the same.

# ## Closures
#
# A closure is a function that remembers variables from the scope where it
# was created, even after that scope has finished.

# ### Returning a Function

def make_subtractor(n):
    return lambda x: x - n

sub3 = make_subtractor(3)
result = sub3(10)  # 7
print(result)

# ### What Is Captured?
#
# The inner function captures the variable itself, not a copy of its value.
# To rebind a captured variable, declare it `nonlocal`:

def create_counter():
    count = 0
    def increment():
        nonlocal count
        count += 1
        return count
    return increment

counter = create_counter()
print(counter())  # 1
print(counter())  # 2

# Each call to `create_counter` creates a fresh `count`, so two counters do
# not share state.
#
# Capturing variables rather than values has a classic pitfall in loops.
# Every lambda below sees the final value of `i`:

adders = [lambda x: x + i for i in range(3)]
[f(10) for f in adders]  # twelve, three times

# Binding the current value through a default argument fixes it:

adders = [lambda x, i=i: x + i for i in range(3)]
[f(10) for f in adders]  # ten, eleven, twelve

# ## Additional Topics

# ### Default and Keyword Arguments in Anonymous Functions

(lambda x, scale=1: x * scale)(5, scale=2)  # 10

# ### Recursive Anonymous Functions

factorial = lambda x: 1 if x <= 1 else x * factorial(x - 1)
result = factorial(5)  # 120
print(result)

# The lambda refers to itself through the name `factorial`, which is looked
# up when the lambda runs, not when it is created.

# ## Conclusion
#
# Anonymous functions and closures are key tools for concise and expressive
# Python. Try these examples in your own projects!
