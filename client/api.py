import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Accept": "application/json"})

def healthz():   r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def group():     r=S.get(f"{API}/group",  timeout=10); r.raise_for_status(); return r.json()
def terms():     r=S.get(f"{API}/terms",  timeout=10); r.raise_for_status(); return r.json()
def series():    r=S.get(f"{API}/series", timeout=10); r.raise_for_status(); return r.json()
def dates():     r=S.get(f"{API}/dates",  timeout=30); r.raise_for_status(); return r.json()

def normalize(date: str):
    r = S.get(f"{API}/normalize", params={"date": date}, timeout=10)
    r.raise_for_status()
    return r.json()

def observation(date: str):
    # query-string form so "/" and "\" in the date survive any proxy
    r = S.get(f"{API}/observations", params={"date": date}, timeout=20)
    r.raise_for_status()
    return r.json()
