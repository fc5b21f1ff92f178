"""Tests for deferred population changes."""

from fishgame.mutation_queue import FishMutationQueue


class TestFishMutationQueue:
    def test_spawn_and_drain(self, make_fish):
        queue = FishMutationQueue()
        fish = make_fish(0, 100)

        assert queue.request_spawn(fish, reason="reproduction", related_id=7)
        assert not queue.request_spawn(fish)
        assert queue.pending_counts() == {"spawns": 1, "removals": 0}

        spawns = queue.drain_spawns()

        assert [m.fish for m in spawns] == [fish]
        assert spawns[0].related_id == 7
        assert queue.drain_spawns() == []

    def test_removal_is_deduplicated(self, make_fish):
        queue = FishMutationQueue()
        fish = make_fish(0, 100)

        assert queue.request_remove(fish, reason="eaten")
        assert not queue.request_remove(fish)
        assert queue.is_pending_removal(fish)
        assert len(queue.drain_removals()) == 1
        assert not queue.is_pending_removal(fish)

    def test_removal_cancels_pending_spawn(self, make_fish):
        queue = FishMutationQueue()
        fish = make_fish(0, 100)
        queue.request_spawn(fish)

        queue.request_remove(fish)

        assert queue.pending_counts() == {"spawns": 0, "removals": 1}
        assert queue.drain_spawns() == []

    def test_clear(self, make_fish):
        queue = FishMutationQueue()
        queue.request_spawn(make_fish(0, 100))
        queue.request_remove(make_fish(0, 100))
        queue.clear()
        assert queue.pending_counts() == {"spawns": 0, "removals": 0}
