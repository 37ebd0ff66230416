from filediff.main import main_entry

main_entry()
