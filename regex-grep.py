#!/bin/env python3

import regex_vm.grep as grep

if __name__ == '__main__':
    grep.main()
