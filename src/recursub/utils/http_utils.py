from ..config import USER_AGENT, logger
import requests
import backoff

def get_session():
    session = requests.Session()
    session.headers.update({'User-Agent': USER_AGENT})
    return session

@backoff.on_exception(backoff.expo, requests.exceptions.RequestException, max_tries=5, jitter=backoff.full_jitter, logger=logger)
def fetch_text(url, timeout=10):
    session = get_session()
    try:
        response = session.get(url, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
        return response.text
    finally:
        session.close()
