from cluster_info.driver import main

main()
