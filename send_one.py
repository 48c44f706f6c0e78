import errno
import random
import sys

import requests

SEND_URL = "http://127.0.0.1:5757/send_message"
GET_URL = "http://127.0.0.1:5757/get_message"
TTL = 60000  # 1 minute
KEY_LENGTH = 95
ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
HEADERS = {"Connection": "close"}

def generate_key(length=KEY_LENGTH):
    return ''.join(random.choices(ALPHABET, k=length))

def build_payload(address, message):
    return {
        "pub_key": address,
        "message": message,
        "ttl": TTL
    }

def error_code(exc):
    seen = set()
    pending = [exc]
    while pending:
        current = pending.pop()
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, OSError) and current.errno in errno.errorcode:
            return errno.errorcode[current.errno]
        pending.append(getattr(current, "reason", None))
        pending.append(current.__cause__)
        pending.append(current.__context__)
        pending.extend(a for a in getattr(current, "args", ()) if isinstance(a, BaseException))
    return type(exc).__name__

def _post(url, payload):
    try:
        return requests.post(url, json=payload, headers=HEADERS)
    except requests.exceptions.RequestException as e:
        print("ERROR: ", error_code(e), file=sys.stderr)
        return None

def _body(response):
    try:
        body = response.json()
    except ValueError:
        return {}
    if not isinstance(body, dict):
        return {}
    return body

def _status(response):
    body = _body(response)
    if "status" in body:
        return body["status"]
    return response.status_code

def send(address, message, url=SEND_URL):
    response = _post(url, build_payload(address, message))
    if response is None:
        return None
    if response.status_code != 200:
        # non-200 is deliberately not reported
        return response
    print("response status:", _status(response))
    return response

def get_messages(address, url=GET_URL):
    response = _post(url, {"pub_key": address})
    if response is None or response.status_code != 200:
        return None
    return _body(response).get("value")

def main():
    pubkey = generate_key()
    text = "test message"
    send(pubkey, text)

if __name__ == "__main__":
    main()
