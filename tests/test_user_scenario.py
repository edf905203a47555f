"""
End-to-end service scenario on the in-memory store with real bcrypt hashing.
"""
import unittest

from devmatching.core.exceptions import DuplicateError, InvalidAccessError
from devmatching.repositories.user_memory import UserMemoryRepository
from devmatching.schemas import CreateUserRequest, UpdateUserRequest
from devmatching.services.user_service import UserService
from devmatching.utils.security import BcryptPasswordHasher


class TestUserServiceScenario(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.store = UserMemoryRepository()
        self.service = UserService(self.store, BcryptPasswordHasher())

    async def test_create_update_delete_flow(self):
        alice = await self.service.create_user(
            CreateUserRequest(username="alice", password="pw1", nick_name="nickA", school_name="schoolA")
        )
        self.assertEqual(alice.id, 1)

        stored = await self.store.find_by_id(alice.id)
        self.assertEqual(stored.username, "alice")
        self.assertEqual(stored.nick_name, "nickA")
        self.assertNotEqual(stored.password, "pw1")
        self.assertTrue(BcryptPasswordHasher().verify("pw1", stored.password))

        with self.assertRaises(DuplicateError):
            await self.service.create_user(
                CreateUserRequest(username="alice", password="pw2", nick_name="nickX", school_name="schoolX")
            )

        bob = await self.service.create_user(
            CreateUserRequest(username="bob", password="pw2", nick_name="nickB", school_name="schoolB")
        )
        self.assertEqual(bob.id, 2)

        acting_alice = await self.store.find_by_id(1)
        updated = await self.service.update_user(
            UpdateUserRequest(nick_name="nickA", school_name="schoolB"), 1, acting_alice
        )
        self.assertEqual(updated.nick_name, "nickA")
        self.assertEqual(updated.school_name, "schoolB")

        reloaded = await self.store.find_by_id(1)
        self.assertEqual(reloaded.school_name, "schoolB")
        self.assertEqual(reloaded.username, "alice")
        self.assertEqual(reloaded.password, stored.password)

        acting_bob = await self.store.find_by_id(2)
        with self.assertRaises(InvalidAccessError):
            await self.service.delete_user(1, acting_bob)
        self.assertIsNotNone(await self.store.find_by_id(1))

        with self.assertRaises(DuplicateError):
            await self.service.update_user(
                UpdateUserRequest(nick_name="nickA", school_name="schoolB"), 2, acting_bob
            )

        await self.service.delete_user(1, reloaded)
        self.assertIsNone(await self.store.find_by_id(1))
        self.assertEqual(self.store.count(), 1)


class TestExactStringMatching(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = UserMemoryRepository()
        self.service = UserService(self.store, BcryptPasswordHasher())
        await self.service.create_user(
            CreateUserRequest(username="alice", password="pw1", nick_name="nickA", school_name="schoolA")
        )

    async def test_case_and_whitespace_variants_are_distinct(self):
        variants = [("Alice", "NickA"), ("alice ", "nickA "), (" alice", "nicka")]

        for username, nick_name in variants:
            created = await self.service.create_user(
                CreateUserRequest(username=username, password="pw", nick_name=nick_name, school_name="s")
            )
            self.assertEqual(created.username, username)
            self.assertEqual(created.nick_name, nick_name)

        self.assertEqual(self.store.count(), 4)

    async def test_exact_username_is_duplicate(self):
        with self.assertRaises(DuplicateError) as ctx:
            await self.service.create_user(
                CreateUserRequest(username="alice", password="pw", nick_name="other", school_name="s")
            )
        self.assertEqual(ctx.exception.field, "username")

    async def test_exact_nick_name_is_duplicate(self):
        with self.assertRaises(DuplicateError) as ctx:
            await self.service.create_user(
                CreateUserRequest(username="bob", password="pw", nick_name="nickA", school_name="s")
            )
        self.assertEqual(ctx.exception.field, "nick_name")

    async def test_update_to_case_variant_of_other_nick_name(self):
        bob = await self.service.create_user(
            CreateUserRequest(username="bob", password="pw", nick_name="nickB", school_name="s")
        )
        acting_bob = await self.store.find_by_id(bob.id)

        updated = await self.service.update_user(
            UpdateUserRequest(nick_name="NICKA", school_name="s"), bob.id, acting_bob
        )
        self.assertEqual(updated.nick_name, "NICKA")

        with self.assertRaises(DuplicateError):
            await self.service.update_user(
                UpdateUserRequest(nick_name="nickA", school_name="s"), bob.id, acting_bob
            )


class TestUserMemoryRepository(unittest.IsolatedAsyncioTestCase):
    async def test_ids_are_not_reused_after_delete(self):
        store = UserMemoryRepository()
        service = UserService(store, BcryptPasswordHasher())

        first = await service.create_user(
            CreateUserRequest(username="u1", password="p", nick_name="n1", school_name="s")
        )
        await store.delete(await store.find_by_id(first.id))
        second = await service.create_user(
            CreateUserRequest(username="u1", password="p", nick_name="n1", school_name="s")
        )

        self.assertEqual(first.id, 1)
        self.assertEqual(second.id, 2)

    async def test_lookup_returns_detached_copy(self):
        store = UserMemoryRepository()
        service = UserService(store, BcryptPasswordHasher())
        created = await service.create_user(
            CreateUserRequest(username="u1", password="p", nick_name="n1", school_name="s")
        )

        loaded = await store.find_by_username("u1")
        loaded.nick_name = "changed"

        self.assertEqual((await store.find_by_id(created.id)).nick_name, "n1")
        self.assertIsNone(await store.find_by_nick_name("changed"))


if __name__ == "__main__":
    unittest.main()
