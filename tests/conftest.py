# tests/conftest.py
# -*- coding: utf-8 -*-
"""
Shared fixtures for the pyROB test suite.

Multi-process scenarios are run inside a single interpreter: every rank
is a thread holding a ThreadComm, a small stand-in for an mpi4py
communicator that implements only the calls used by MPIChannel
(Get_rank, Get_size, sendrecv, allreduce, Barrier). The threads run the
same function in lockstep, as MPI processes would.
"""

import copy
import functools
import operator
import queue
import threading

import numpy as np
import pytest

from pyROB.utils import MPIChannel


TIMEOUT = 20.0  # seconds before a blocked collective is declared hung


class ThreadWorld:
    """Shared state of all the ranks of a threaded run."""

    def __init__(self, size):
        self.size = size
        self.barrier = threading.Barrier(size, timeout=TIMEOUT)
        self.slots = [None] * size
        self._lock = threading.Lock()
        self._mailboxes = {}

    def mailbox(self, source, dest, tag):
        with self._lock:
            return self._mailboxes.setdefault((source, dest, tag), queue.Queue())


class ThreadComm:
    """Communicator of one rank of a ThreadWorld."""

    def __init__(self, world, rank):
        self._world = world
        self._rank = rank

    def Get_rank(self):
        return self._rank

    def Get_size(self):
        return self._world.size

    def sendrecv(self, sendobj, dest, sendtag=0, source=None, recvtag=None):
        self._world.mailbox(self._rank, dest, sendtag).put(copy.deepcopy(sendobj))
        return self._world.mailbox(source, self._rank, recvtag).get(timeout=TIMEOUT)

    def allreduce(self, sendobj, op=None):
        # Only sums are needed by pyROB
        world = self._world
        world.slots[self._rank] = copy.deepcopy(sendobj)
        world.barrier.wait()
        out = functools.reduce(operator.add, world.slots)
        world.barrier.wait()
        return out

    def Barrier(self):
        self._world.barrier.wait()


def run_spmd(nprocs, target, *args, tag=1000):
    """
    Run target(channel, *args) on nprocs threaded ranks and return the
    list of results in rank order. The first error raised by a rank is
    re-raised once all the ranks have finished.
    """
    world = ThreadWorld(nprocs)
    results = [None] * nprocs
    errors = [None] * nprocs

    def worker(rank):
        try:
            results[rank] = target(MPIChannel(ThreadComm(world, rank), tag=tag), *args)
        except BaseException as e:
            errors[rank] = e
            world.barrier.abort()

    threads = [threading.Thread(target=worker, args=(rank,)) for rank in range(nprocs)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=2 * TIMEOUT)
    # Errors of the failing rank first, the others only broke on the barrier
    for e in errors:
        if e is not None and not isinstance(e, (threading.BrokenBarrierError, queue.Empty)):
            raise e
    for e in errors:
        if e is not None:
            raise e
    return results


@pytest.fixture
def spmd():
    """Runner of threaded SPMD scenarios."""
    return run_spmd


@pytest.fixture
def rng():
    """Seeded random generator shared by a test."""
    return np.random.default_rng(1234)
