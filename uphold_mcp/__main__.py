from uphold_mcp.main import main

main()
