import random

from markov_chains.markov_model import begin_sequence
from markov_chains.sampling import random_element


def has_suffix(state, suffix):
    return len(suffix) <= len(state) and tuple(state[len(state) - len(suffix):]) == tuple(suffix)


def has_prefix(state, prefix):
    return tuple(state[:len(prefix)]) == tuple(prefix)


def states_with_suffix(model, suffix):
    """
    Returns all the states of the model that end with suffix. While at most one
    state matches, the first token of the suffix is dropped and the search is
    retried, down to a suffix of one token.
    """
    suffix = tuple(suffix)
    while True:
        states = [state for state in model.nodes if has_suffix(state, suffix)]
        if len(states) > 1 or len(suffix) <= 1:
            return states
        suffix = suffix[1:]


def state_with_beginning(model, tokens, strict=False, uniform01=random.random):
    """
    Returns a random state of the model that begins with tokens, or None.

    tokens left-padded with BEGIN is returned as is when it is a state of the model.
    Otherwise, when no state begins with tokens and strict is False, the last
    token is dropped and the search is retried until tokens is empty.
    """
    tokens = tuple(tokens)
    if len(tokens) > model.order:
        raise ValueError(
            f"the length of the initial state ({len(tokens)}) must be equal to "
            f"or lower than the order of the model (i.e. {model.order})"
        )
    padded = begin_sequence(model.order - len(tokens)) + tokens
    if padded in model.nodes:
        return padded
    prefix = tokens
    while prefix:
        states = [state for state in model.nodes if has_prefix(state, prefix)]
        if states:
            return random_element(states, uniform01)
        if strict:
            return None
        prefix = prefix[:-1]
    return None
