"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""
import re

from markov_chains.markov_model import build
from markov_chains.state_search import state_with_beginning
from markov_chains.walker import walk, walk2

CORPUS = """
Longtemps, je me suis couché de bonne heure.
Parfois, à peine ma bougie éteinte, mes yeux se fermaient si vite que je n'avais pas le temps de me dire : je m'endors.
Et, une demi-heure après, la pensée qu'il était temps de chercher le sommeil m'éveillait.
Je voulais poser le volume que je croyais avoir encore dans les mains et souffler ma lumière.
Je n'avais pas cessé en dormant de faire des réflexions sur ce que je venais de lire.
"""


def to_text(words):
    # Removes spaces before punctuation
    return re.sub(r"\s([?.!,:;])", r"\1", ' '.join(words))


if __name__ == '__main__':
    sentences = [re.findall(r"[\w'-]+|[^\w\s]", line) for line in CORPUS.strip().splitlines()]
    print(f"Loaded {len(sentences)} sentences.")
    model = build(sentences, order=2)
    model.show_structure()

    print("plain walks:")
    for _ in range(3):
        print(to_text(walk(model)))
    print("generalized walks:")
    for _ in range(3):
        print(to_text(walk2(model)))

    start = state_with_beginning(model, ['je', 'voulais'])
    if start is None:
        print("no state starts with 'je voulais'")
    else:
        print(to_text(w for w in walk(model, start) if isinstance(w, str)))
