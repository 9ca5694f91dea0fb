"""Describes the dinner domain. Centres around cooking and eating `Food`.

Why bother?

- Cooking takes time. Each item has its own cook time.
- Cooking everything at once is quick, cooking one thing after another is slow.
- Eating cannot be done at once. Each mouthful depends on the belly before it.
- Forget to wait for the cooks and you get pots, not food.

Nothing is stored and nothing leaves the process. The kitchen is in memory and
can be swapped for a fake.
"""
