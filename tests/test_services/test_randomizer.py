# tests/test_services/test_randomizer.py
import random
import unittest
from collections import Counter

import nextup.db.base  # noqa: F401
from nextup.db.session import Base, SessionLocal, engine
from nextup.models.user import User
from nextup.models.team import Team
from nextup.models.session_state import SessionState
from nextup.services.randomizer import RandomizerService, RoundExhaustedError


class FixedIndexRandom(random.Random):
    """Always picks the same index, to observe which id is removed"""

    def __init__(self, index):
        super().__init__()
        self.index = index
        self.sizes = []

    def randrange(self, stop, *args, **kwargs):
        self.sizes.append(stop)
        return min(self.index, stop - 1)


class RandomizerServiceTestCase(unittest.TestCase):

    def setUp(self):
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        self.db = SessionLocal()
        self.user = User(email='a@x.com', password_hash='x')
        self.db.add(self.user)
        self.db.commit()
        self.team_ids = [self.add_team(name) for name in ['Alpha', 'Beta', 'Gamma']]

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def add_team(self, name, user_id=None):
        team = Team(name=name, topic='TBD', members=[], user_id=user_id or self.user.id)
        self.db.add(team)
        self.db.commit()
        return team.id

    def test_get_or_create_state_is_lazy(self):
        service = RandomizerService()
        self.assertIsNone(self.db.query(SessionState).first())

        state = service.get_or_create_state(self.db, self.user.id)
        self.assertEqual(state.remaining_team_ids, [])
        self.assertIsNone(state.last_selected_id)
        self.assertEqual(service.get_or_create_state(self.db, self.user.id).id, state.id)

    def test_draws_each_team_once(self):
        service = RandomizerService(rng=random.Random(7))
        self.assertEqual(service.reset_round(self.db, self.user.id), 3)

        drawn = []
        for expected_remaining in [2, 1, 0]:
            team, remaining = service.draw_next(self.db, self.user.id)
            drawn.append(team.id)
            self.assertEqual(remaining, expected_remaining)

        self.assertEqual(sorted(drawn), sorted(self.team_ids))
        with self.assertRaises(RoundExhaustedError):
            service.draw_next(self.db, self.user.id)

    def test_draw_uses_index_over_remaining_ids(self):
        rng = FixedIndexRandom(1)
        service = RandomizerService(rng=rng)
        service.reset_round(self.db, self.user.id)

        team, _ = service.draw_next(self.db, self.user.id)
        self.assertEqual(team.id, self.team_ids[1])
        self.assertEqual(rng.sizes, [3])

        state = service.get_or_create_state(self.db, self.user.id)
        self.assertEqual(state.remaining_team_ids, [self.team_ids[0], self.team_ids[2]])
        self.assertEqual(state.last_selected_id, self.team_ids[1])

    def test_first_draw_is_roughly_uniform(self):
        service = RandomizerService(rng=random.Random(1234))
        counts = Counter()
        for _ in range(600):
            service.reset_round(self.db, self.user.id)
            team, _ = service.draw_next(self.db, self.user.id)
            counts[team.id] += 1

        self.assertEqual(set(counts), set(self.team_ids))
        for team_id in self.team_ids:
            self.assertGreater(counts[team_id], 140)

    def test_reset_round_clears_last_selected(self):
        service = RandomizerService()
        service.reset_round(self.db, self.user.id)
        service.draw_next(self.db, self.user.id)

        service.reset_round(self.db, self.user.id)
        remaining, last_selected = service.status(self.db, self.user.id)
        self.assertEqual(remaining, 3)
        self.assertIsNone(last_selected)

    def test_purge_team(self):
        service = RandomizerService(rng=FixedIndexRandom(0))
        service.reset_round(self.db, self.user.id)
        service.draw_next(self.db, self.user.id)

        service.purge_team(self.db, self.user.id, self.team_ids[0])
        service.purge_team(self.db, self.user.id, self.team_ids[1])
        self.db.commit()

        state = service.get_or_create_state(self.db, self.user.id)
        self.assertEqual(state.remaining_team_ids, [self.team_ids[2]])
        self.assertIsNone(state.last_selected_id)

    def test_stale_ids_are_skipped(self):
        service = RandomizerService(rng=FixedIndexRandom(0))
        service.reset_round(self.db, self.user.id)
        stale = self.db.get(Team, self.team_ids[0])
        self.db.delete(stale)
        self.db.commit()

        team, remaining = service.draw_next(self.db, self.user.id)
        self.assertEqual(team.id, self.team_ids[1])
        self.assertEqual(remaining, 1)

    def test_add_team_is_idempotent(self):
        service = RandomizerService()
        service.add_team(self.db, self.user.id, self.team_ids[0])
        service.add_team(self.db, self.user.id, self.team_ids[0])
        remaining, _ = service.status(self.db, self.user.id)
        self.assertEqual(remaining, 1)


if __name__ == '__main__':
    unittest.main()
