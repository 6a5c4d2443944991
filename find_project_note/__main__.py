from find_project_note import run_server

run_server()
