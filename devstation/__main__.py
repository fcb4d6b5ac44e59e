import devstation

if __name__ == '__main__':
	devstation.run_as_a_module()
