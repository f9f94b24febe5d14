# catalog/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from requests.exceptions import ConnectionError, ConnectTimeout, Timeout


#tylko bledy transportu, HTTPError (4xx/5xx) leci od razu
def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type((ConnectionError, Timeout)),
    )


#dla POST: tylko gdy request nie doszedl do serwera, inaczej duplikat
def connect_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception_type(ConnectTimeout),
    )
