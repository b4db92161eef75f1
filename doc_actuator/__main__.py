"""python -m doc_actuator 엔트리포인트."""

from doc_actuator.services.web.server import main

main()
