import random

from markov_chains.markov_model import END, begin_sequence
from markov_chains.sampling import random_element, random_key
from markov_chains.state_search import states_with_suffix


def append_token(state, token):
    # drops the first token of the state
    return tuple(state[1:]) + (token,)


def next_token(model, state, uniform01=random.random):
    return random_key(model.nodes[tuple(state)], uniform01)


def generalized_transition(model, uniform01=random.random):
    """
    Builds a transition which, after the usual append_token, moves to a random
    state sharing the longest suffix that more than one state of the model ends with.
    This avoids getting stuck in states with a single possible continuation.
    """
    def new_state(state, token):
        states = states_with_suffix(model, append_token(state, token))
        if not states:
            raise KeyError(f"no state of the model ends with {token!r}")
        return random_element(states, uniform01)
    return new_state


def walker(model, init_state, init_accum, new_state=append_token, uniform01=random.random):
    """
    Random walk through the chain from init_state until END is drawn.

    new_state(state, token) gives the state following state once token was
    drawn. The drawn tokens are appended to a copy of init_accum, which is returned.
    """
    state = tuple(init_state)
    accum = list(init_accum)
    while True:
        token = next_token(model, state, uniform01)
        if token is END:
            return accum
        accum.append(token)
        state = new_state(state, token)


def walk(model, init_state=None, uniform01=random.random):
    """Random walk from init_state, or from the all-BEGIN state when None.
    An explicit init_state is part of the returned sequence."""
    if init_state is None:
        return walker(model, begin_sequence(model.order), [], uniform01=uniform01)
    return walker(model, init_state, init_state, uniform01=uniform01)


def walk2(model, init_state=None, uniform01=random.random):
    """Same as walk(), with generalized_transition between states."""
    transition = generalized_transition(model, uniform01)
    if init_state is None:
        return walker(model, begin_sequence(model.order), [], transition, uniform01)
    return walker(model, init_state, init_state, transition, uniform01)
