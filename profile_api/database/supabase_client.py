from fastapi import Request
from supabase import create_client, Client
from supabase.lib.client_options import SyncClientOptions

from profile_api.config.settings import Settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Anon-key client for a single request.

    Sessions are handed back to the caller, never kept: with auto refresh on,
    the client would rotate the caller's refresh token from a background timer.
    """
    return create_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=SyncClientOptions(auto_refresh_token=False, persist_session=False),
    )


def get_supabase(request: Request) -> Client:
    return create_supabase_client(request.app.state.settings)


def scope_to_user(supabase: Client, access_token: str) -> Client:
    """Send table queries with the caller's JWT so the profiles RLS policies apply to them."""
    supabase.postgrest.auth(access_token)
    return supabase
