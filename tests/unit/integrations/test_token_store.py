"""
Unit Tests for the bearer token store
"""
import json

from hostelia.integrations.token_store import TokenStore


class TestTokenStore:

    def test_set_and_clear(self):
        store = TokenStore()

        store.set('abc', {'name': 'Asha Rao'})
        assert store.token == 'abc'
        assert store.user == {'name': 'Asha Rao'}

        store.clear()
        assert store.token is None
        assert store.user is None

    def test_clear_if_current_clears_matching_token(self):
        store = TokenStore(token='expired')

        assert store.clear_if_current('expired') is True
        assert store.token is None

    def test_clear_if_current_keeps_replaced_token(self):
        """A fresh login must survive a late 401 for the old token"""
        store = TokenStore(token='old')
        store.set('fresh')

        assert store.clear_if_current('old') is False
        assert store.token == 'fresh'

    def test_clear_if_current_ignores_missing_token(self):
        store = TokenStore(token='abc')

        assert store.clear_if_current(None) is False
        assert store.token == 'abc'

    def test_persists_to_json_file(self, tmp_path):
        path = tmp_path / 'session' / 'token.json'

        TokenStore(path=path).set('abc', {'role': 'warden'})

        assert json.loads(path.read_text()) == {'token': 'abc', 'user': {'role': 'warden'}}
        reloaded = TokenStore(path=path)
        assert reloaded.token == 'abc'
        assert reloaded.user == {'role': 'warden'}

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / 'token.json'
        store = TokenStore(path=path)
        store.set('abc')

        store.clear()

        assert not path.exists()

    def test_unreadable_file_is_ignored(self, tmp_path):
        path = tmp_path / 'token.json'
        path.write_text('{not json')

        assert TokenStore(path=path).token is None
