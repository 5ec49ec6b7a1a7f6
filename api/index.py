# api/index.py  (serverless entrypoint for the standalone JSON handler; route is /generate-solution)
# The host maps this file to /api/index; vercel.json rewrites /generate-solution here,
# and the request path Flask sees stays /generate-solution.
# The host's Python runtime serves the module-level WSGI `app`.

from malaria_watch.solution_service.server import create_standalone_app

app = create_standalone_app()
