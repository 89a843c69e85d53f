import numpy as np

from markov_chains.sampling import check_occurrences


class _Begin_token:
    def __repr__(self):
        return "BEGIN"

    def __reduce__(self):
        return "BEGIN"


class _End_token:
    def __repr__(self):
        return "END"

    def __reduce__(self):
        return "END"


# reserved boundary tokens, compared by identity
BEGIN = _Begin_token()
END = _End_token()


def begin_sequence(n):
    # the padding every trained sequence starts with
    return tuple([BEGIN] * n)


def std_weight(state, token):
    return 1


class Markov_model:
    """Fixed-order Markov chain over arbitrary hashable tokens.

    nodes maps every state (a tuple of `order` tokens) to its occurrence table,
    a dict pairing each token seen right after the state with its weight.
    Models are built with build() and merged with combine(); they are not
    modified afterwards.
    """

    def __init__(self, order, nodes):
        self.order = order
        self.nodes = nodes

    def __len__(self):
        return len(self.nodes)

    def __contains__(self, state):
        return tuple(state) in self.nodes

    def __repr__(self):
        return f"Markov_model(order={self.order}, states={len(self.nodes)})"

    def occurrences(self, state):
        return self.nodes[tuple(state)]

    def get_all_unique_tokens(self):
        # first-seen order, paddings included
        tokens = {}
        for state, occurrences in self.nodes.items():
            for token in state:
                tokens.setdefault(token, None)
            for token in occurrences:
                tokens.setdefault(token, None)
        return list(tokens)

    def get_all_unique_tokens_except_paddings(self):
        return [t for t in self.get_all_unique_tokens() if t is not BEGIN and t is not END]

    def voc_size(self):
        return len(self.get_all_unique_tokens())

    def transition_probabilities(self, state):
        occurrences = self.occurrences(state)
        check_occurrences(occurrences)
        tokens = list(occurrences.keys())
        probs = np.array(list(occurrences.values()), dtype=float)
        probs /= probs.sum()
        return tokens, probs

    def show_structure(self):
        print(f"order: {self.order}, number of states: {len(self.nodes)}")
        print(f"voc size: {self.voc_size()}")
        if not self.nodes:
            return
        # sparsity of the continuations
        conts_sizes = [len(occurrences) for occurrences in self.nodes.values()]
        print(f"min continuations: {min(conts_sizes)}, max: {max(conts_sizes)}")
        total = sum(sum(occurrences.values()) for occurrences in self.nodes.values())
        print(f"average weight per state: {total / len(self.nodes)}")


def build(sequences, order=2, weight=std_weight):
    """Trains a Markov chain on a collection of token sequences.

    Each sequence is padded with `order` BEGIN tokens and followed by END, so
    even an empty sequence yields the transition from the all-BEGIN state to END.
    weight(state, token) gives the increment added for each observed
    transition, 1 by default.
    """
    if order < 1:
        raise ValueError(f"order must be a positive integer, got {order}")
    nodes = {}
    padding = list(begin_sequence(order))
    for sequence in sequences:
        # BEGIN ... BEGIN token ... token END
        tokens = padding + list(sequence) + [END]
        for i in range(len(tokens) - order):
            state = tuple(tokens[i:i + order])
            token = tokens[i + order]
            token_counts = nodes.setdefault(state, {})
            token_counts[token] = token_counts.get(token, 0) + weight(state, token)
    return Markov_model(order, nodes)


def combine(model, *others):
    """Returns a new model holding the nodes of all the given models.

    All models should share the same order, which is not checked. When several
    models know the same state, the occurrence table of the last one wins: tables
    are replaced, not summed.
    """
    nodes = dict(model.nodes)
    for other in others:
        nodes.update(other.nodes)
    return Markov_model(model.order, nodes)
