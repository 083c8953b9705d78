import logging
from supabase import Client
from profile_api.core.errors import ApiError, CollaboratorError, provider_error_message
from profile_api.modules.profiles.models import PROFILES_TABLE
from profile_api.modules.profiles.schemas import Profile, ProfileUpdateRequest

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Read/update of the caller's own profiles row.

    The client must be scoped to the caller's JWT (see get_user_supabase);
    RLS decides what the query may touch, this class only filters on the
    caller's id.
    """

    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_profile(self, user_id: str) -> Profile:
        try:
            result = self.supabase.table(PROFILES_TABLE)\
                .select("*")\
                .eq("id", user_id)\
                .single()\
                .execute()
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Profile read failed for %s: %s", user_id, message)
            raise CollaboratorError(message)

        if not result.data:
            raise CollaboratorError("Profile not found")

        return Profile(**result.data)

    def update_profile(self, user_id: str, profile_data: ProfileUpdateRequest) -> Profile:
        """Partial update: only fields present in the request body are sent"""
        update_data = profile_data.model_dump(exclude_unset=True)
        if not update_data:
            return self.get_profile(user_id)

        try:
            result = self.supabase.table(PROFILES_TABLE)\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise CollaboratorError("Profile not found")

            return Profile(**result.data[0])
        except ApiError:
            raise
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Profile update failed for %s: %s", user_id, message)
            raise CollaboratorError(message)
