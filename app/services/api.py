# app/services/api.py

import os
import requests

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FINANCE_API_URL", "http://localhost:8000")


def _auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


def _result(res):
    """
    Returns the decoded body of a successful response, or an
    ``{"error": ...}`` dict carrying the server's detail message.
    """
    try:
        data = res.json()
    except ValueError:
        data = None

    if res.ok:
        return data
    if isinstance(data, dict) and data.get("detail"):
        return {"error": data["detail"]}
    return {"error": f"Status {res.status_code}"}


def _send(method, path, access_token=None, payload=None):
    headers = _auth_headers(access_token) if access_token else None
    try:
        res = requests.request(method, f"{FASTAPI_URL}{path}", json=payload, headers=headers)
    except requests.RequestException as e:
        return {"error": str(e)}
    return _result(res)


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup(email, password, name):
    """
    Registers a new account. Returns the created user's public fields.
    """
    return _send("POST", "/signup", payload={"email": email, "password": password, "name": name})


def signin(email, password):
    """
    Logs in and returns ``{"message", "token"}``.
    """
    return _send("POST", "/signin", payload={"email": email, "password": password})


def get_me(access_token):
    return _send("GET", "/users/me", access_token)


# -------------------------
# Transactions
# -------------------------

def list_transactions(access_token):
    """
    Lists the caller's transactions, newest first.
    Returns an empty list when the request fails.
    """
    data = _send("GET", "/transactions", access_token)
    return data if isinstance(data, list) else []


def create_transaction(access_token, type, category, amount, date, note=""):
    payload = {
        "type": type,
        "category": category,
        "amount": amount,
        "note": note,
        "date": date,
    }
    return _send("POST", "/transactions", access_token, payload)


def update_transaction(access_token, transaction_id, type, category, amount, date, note=""):
    payload = {
        "id": transaction_id,
        "type": type,
        "category": category,
        "amount": amount,
        "note": note,
        "date": date,
    }
    return _send("PUT", "/transactions", access_token, payload)


def delete_transaction(access_token, transaction_id):
    return _send("DELETE", "/transactions", access_token, {"id": transaction_id})
