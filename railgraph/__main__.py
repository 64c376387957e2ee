from railgraph.cli import main

main()
