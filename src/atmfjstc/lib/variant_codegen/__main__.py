from atmfjstc.lib.variant_codegen.cli.main import main


main()
