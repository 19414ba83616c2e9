from petstay.api.main import run_server

run_server()
