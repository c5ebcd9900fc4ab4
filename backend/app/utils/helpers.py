# backend/app/utils/helpers.py


def extract_domain(email: str) -> str:
    # everything after the first "@"; no syntax checks here
    if not email or "@" not in email:
        return ""
    return email.partition("@")[2]
