"""System probes (power, CPU, memory, system, network, audio) that each return one short piece of status text."""