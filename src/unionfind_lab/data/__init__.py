from unionfind_lab.data.workload import Workload
