"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
from markov_chains.markov_model import build, combine
from markov_chains.walker import walk, walk2

if __name__ == '__main__':
    ascending = [[1, 2, 3, 2, 3, 4, 3, 4, 5, 4, 5, 6], [5, 6, 7, 6, 7, 8, 7, 8, 9, 8, 9, 10]]
    descending = [list(reversed(seq)) for seq in ascending]
    up = build(ascending, order=2)
    # favours the descending steps
    down = build(descending, order=2, weight=lambda state, token: 3 if isinstance(token, int) and state[-1] == token + 1 else 1)
    up.show_structure()
    down.show_structure()

    both = combine(up, down)
    print("combined model:")
    both.show_structure()
    print("integer sequence:")
    print(walk(both))
    print("generalized integer sequence:")
    print(walk2(both))
