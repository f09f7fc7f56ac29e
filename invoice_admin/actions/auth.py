"""Sign-in form action."""
from typing import Any, Mapping, MutableMapping, Optional

from sqlalchemy.orm import Session

from ..auth import AuthError, sign_in


async def authenticate(
    prev_state: Optional[str],
    form_data: Mapping[str, Any],
    db: Session,
    session: MutableMapping[str, Any],
) -> Optional[str]:
    """
    Sign in with the credentials provider.

    Args:
        prev_state: Message from the previous attempt (unused)
        form_data: Raw sign-in form fields
        db: Database session
        session: Request session to store the user in

    Returns:
        A message for the form when sign-in fails, None on success.
        Errors that aren't ``AuthError`` propagate to the caller.
    """
    try:
        await sign_in("credentials", form_data, db, session)
    except AuthError as error:
        if error.type == "CredentialsSignin":
            return "Invalid credentials."
        return "Something went wrong."
    return None
